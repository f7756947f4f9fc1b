"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt) or the plotting (pyqtgraph).
It deals with portfolio math, text parsing and display formatting.
"""
