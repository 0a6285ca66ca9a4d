"""
Entry point for running the ockit CLI as a module.

Usage: python -m ockit.cli [command] [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
