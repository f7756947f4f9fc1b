"""
Application Initialization
==========================
Run with: python -m portfoliofrontier

This is the composition root. It:
1. Sets up logging.
2. Creates the Qt application.
3. Instantiates the parameter store (model) and the main window (view),
   passing the store into the view.
4. Starts the event loop.
"""
from __future__ import annotations

import argparse
import logging
import sys

from portfoliofrontier.app.application import create_app
from portfoliofrontier.app.state import ParameterStore
from portfoliofrontier.app.ui.main_window import MainWindow
from portfoliofrontier.logging_config import setup_logging


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="portfoliofrontier", description="Two-asset portfolio frontier explorer.")
    parser.add_argument("--debug", action="store_true", help="log every recompute and parse fallback")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    argv = sys.argv if argv is None else argv
    args = _parse_args(argv[1:])
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    app = create_app(argv)
    store = ParameterStore()
    win = MainWindow(store)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
