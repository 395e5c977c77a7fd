#!/usr/bin/env python3
"""
CoinPeek launcher.

Same as the installed ``coinpeek`` console script. Settings come from the
environment or a ``.env`` file in the working directory (see README).
"""
from gui.app import main

if __name__ == "__main__":
    main()
