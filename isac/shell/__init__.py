"""
Shell package for the interactive command line interface.

This package provides the prompt loop that renders the selected provider's prompt.
"""

from .prompter import Prompter

__all__ = ['Prompter']
