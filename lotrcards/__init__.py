"""
LOTR Cards, a card catalog archiver for the Lord of the Rings TCG
MIT License
"""

from ._version import __version__
from .classes import LotrCardObject

__all__ = [
    "__version__",
    "LotrCardObject",
]
