"""
LOTR Cards internal objects
"""

from .lotr_card import LotrCardObject

__all__ = [
    "LotrCardObject",
]
