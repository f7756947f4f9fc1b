"""
Entry Point Script (Bootstrap)
==============================
Starts the application from a source checkout without installing it.

It adds 'src' to 'sys.path' so that imports like
'from portfoliofrontier.model...' resolve.

Usage:
    $ python run.py [--debug] [--log-file app.log]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from portfoliofrontier.app.main import main

if __name__ == "__main__":
    sys.exit(main())
