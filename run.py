#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four search engine

Examples:
    python run.py cvc 4 42 --time
    python run.py pvc 5
    python run.py pvp --position 3,3,4
"""

import sys

from connect4_search.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
