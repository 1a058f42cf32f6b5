"""
Entry point for running the gobuild CLI as a module.

Usage: python -m gobuild.cli [options]
"""

from .parser import main

if __name__ == "__main__":
    main()
