"""
gobuild - cross-compile a program for many target platforms in one run.
"""

__version__ = "0.1.0"
