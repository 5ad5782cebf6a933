"""tapchess — a click-driven chessboard with a pure-Python rule core."""

__version__ = "0.1.0"
