"""
Entry point for running ockit as a module.

Usage: python -m ockit [command] [options]
"""

from ockit.cli.parser import main

if __name__ == "__main__":
    main()
