"""
mushaf - remote-navigable browser for the Quran text corpus
"""

__version__ = "0.3.0"
