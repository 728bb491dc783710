"""
Librarium: personal reading tracker, type-ahead library search.
"""

__version__ = "1.0.0"
