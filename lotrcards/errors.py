"""
LOTR Cards exception types
"""
from typing import Optional


class LotrCardsError(Exception):
    """
    Base class for every error raised by LOTR Cards
    """


class CardExtractionError(LotrCardsError):
    """
    A catalog page could not be turned into a card
    """


class HtmlParseError(CardExtractionError):
    """
    The HTML body could not be read
    """


class HeadingMissingError(CardExtractionError):
    """
    No heading anchor text was found on the page
    """


class MetadataMissingError(CardExtractionError):
    """
    The heading does not carry a set/card token like 1R1
    """


class ImageMissingError(CardExtractionError):
    """
    The card image has no src attribute
    """


class FetchFailedError(LotrCardsError):
    """
    An image could not be downloaded or stored
    """


class WriteFailedError(LotrCardsError):
    """
    A card Markdown file could not be written
    """


class EnvLoadError(LotrCardsError):
    """
    The .env file could not be loaded, or BASE_URL is not set
    """


class HttpNonOkError(LotrCardsError):
    """
    A catalog page answered with something other than 200
    """

    status_code: Optional[int]

    def __init__(self, url: str, status_code: Optional[int]) -> None:
        super().__init__(f"{url} returned HTTP {status_code}")
        self.status_code = status_code
