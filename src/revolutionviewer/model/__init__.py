"""
The MODEL layer contains pure data structures and numerics.
It has NO knowledge of the GUI (Qt) or of the rendering widgets.
It deals with parsing, sampling and geometry.
"""
