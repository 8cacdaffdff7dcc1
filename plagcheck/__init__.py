"""
Plagiarism checker

Scores how similar two text documents are on a 0 to 1 scale.
"""

__version__ = "1.0.0"

from .core import *
