"""
LOTR Cards Information Providers
"""

from .lotr_catalog_provider import LotrCatalogProvider

__all__ = [
    "LotrCatalogProvider",
]
