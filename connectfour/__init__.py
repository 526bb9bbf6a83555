"""
connectfour - Connect Four game engine

This package provides the board model, win detection and turn state machine
for Connect Four, a per-session event stream for presentation code, a
Gymnasium environment and a terminal interface.
"""

# Version number
__version__ = '0.2.0'
