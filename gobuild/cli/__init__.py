"""
gobuild CLI module.

This module provides the command-line interface for gobuild.
"""

from .parser import CLI, main

__all__ = ["CLI", "main"]
