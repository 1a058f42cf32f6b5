"""
Entry point for running gobuild as a module.

Usage: python -m gobuild -platform Linux-AMD64,Windows-AMD64
"""

from gobuild.cli.parser import main

if __name__ == "__main__":
    main()
