"""
connectfour - Connect Four game engine

This package provides the board state machine and win detection for
two-player Connect Four, plus thin callers around it: an ASCII renderer,
a Gymnasium environment and a command-line interface.
"""

__version__ = '0.1.0'
