#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four engine CLI

Usage:
    python run.py play --player1 Ann:red --player2 Bob:yellow
    python run.py check --moves 0,0,1,1,2,2,3
    python run.py --debug-level debug benchmark --iterations 500
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
