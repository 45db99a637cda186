"""Plot y = f(x) and the solids it sweeps out about the X and Y axes."""
__version__ = "0.1.0"
