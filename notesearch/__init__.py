"""
notesearch - quick-search source over a game library's names and notes.
"""

__version__ = "0.1.0"
