#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine

Examples:

    # Two players at one keyboard on the classic 7x6 board
    python run.py play

    # A larger board with custom names and colours, player 2 opening
    python run.py --width 9 --height 7 play --p1-name Ada --p1-color cyan --p2-name Bo --first 2

    # Analyse a position (42 values, row by row from the top)
    python run.py test --position 0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,1,1,1,2,2,2

    # Benchmark with detailed logging
    python run.py --debug_level debug benchmark --iterations 5000
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
