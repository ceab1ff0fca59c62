"""
LOTR Cards version, kept separate so setup.py can read it without importing the package
"""

__version__ = "1.0.0"
