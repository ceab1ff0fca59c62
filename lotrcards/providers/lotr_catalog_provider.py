"""
Lord of the Rings TCG card catalog provider
"""
import logging
import posixpath
import re
import urllib.parse
from typing import IO, Dict, Optional, Tuple, Union

import bs4
import requests
from bs4.builder import ParserRejectedMarkup
from singleton_decorator import singleton

from .. import constants
from ..classes import LotrCardObject
from ..errors import (
    HeadingMissingError,
    HtmlParseError,
    HttpNonOkError,
    ImageMissingError,
    MetadataMissingError,
)
from ..utils import normalize_key, normalize_spaces, sanitize_filename
from .abstract_provider import AbstractProvider

LOGGER = logging.getLogger(__name__)

CardHtml = Union[bytes, str, IO[bytes], IO[str]]


@singleton
class LotrCatalogProvider(AbstractProvider):
    """
    LOTR card catalog container
    """

    # 1R1 => set 1, rarity R, card 1
    METADATA_REGEX = re.compile(r"([0-9]+)([A-Z])([0-9]+)")

    HEADING_SELECTOR = "h1 a"
    PROPS_TABLE_SELECTOR = "table.inline"
    PROPS_KEY_SELECTOR = "td.col0"
    PROPS_VALUE_SELECTOR = "td.col1"
    IMAGE_SELECTOR = "p span a img.media"

    base_url: str

    def __init__(
        self, base_url: Optional[str] = None, timeout: Optional[float] = None
    ) -> None:
        if base_url is None:
            from ..lotr_config import LotrConfig

            base_url = LotrConfig().base_url
            timeout = LotrConfig().http_timeout

        super().__init__(timeout)
        self.base_url = base_url

    def download(self, url: str) -> requests.Response:
        """
        GET a catalog resource, caller is responsible for closing it
        :param url: URL to download from
        :return: Server response
        """
        response = self.session.get(url)
        self.log_download(response)
        return response

    def build_card_url(self, set_number: int, card_index: int) -> str:
        """
        Card page location, e.g. https://host/lotr01001
        :param set_number: Catalog section
        :param card_index: Position within the section, from 1
        :return: Card page URL
        """
        return f"{self.base_url}/{constants.CARD_URL_PREFIX}{set_number:02d}{card_index:03d}"

    def get_card(self, set_number: int, card_index: int) -> LotrCardObject:
        """
        Download and parse a single card page
        :param set_number: Catalog section
        :param card_index: Position within the section, from 1
        :return: Card as found on the page
        """
        url = self.build_card_url(set_number, card_index)
        LOGGER.info(f"Fetching {url}")

        with self.download(url) as response:
            if response.status_code != 200:
                raise HttpNonOkError(url, response.status_code)
            return self.parse_card(
                response.content,
                self.base_url,
                catalog_position=(set_number, card_index),
            )

    def parse_card(
        self,
        card_html: CardHtml,
        base_url: str,
        catalog_position: Optional[Tuple[int, int]] = None,
    ) -> LotrCardObject:
        """
        Parse a card from a given catalog page
        :param card_html: Page body, as bytes, text or a readable stream
        :param base_url: Prefix for the image src, without a trailing slash
        :param catalog_position: (set, card) the page was found at; when given
            these numbers are used and the heading token only has to be present
        :return: Card object
        """
        soup = self._make_soup(card_html)

        heading_tag = soup.select_one(self.HEADING_SELECTOR)
        heading = heading_tag.get_text().strip() if heading_tag else ""
        if not heading:
            raise HeadingMissingError("h1 not found")

        title = heading.split("(")[0].strip()
        if not sanitize_filename(title):
            raise HeadingMissingError(f"no usable title in heading: {heading}")

        match = self.METADATA_REGEX.search(heading)
        if not match:
            raise MetadataMissingError(f"metadata not found in title: {heading}")

        if catalog_position:
            set_no = f"{catalog_position[0]:02d}"
            card_no = f"{catalog_position[1]:03d}"
        else:
            set_no = match.group(1).zfill(2)
            card_no = match.group(3).zfill(3)
        if len(set_no) > 2 or len(card_no) > 3:
            raise MetadataMissingError(f"metadata out of range in title: {heading}")

        image_tag = soup.select_one(self.IMAGE_SELECTOR)
        image_src = image_tag.get("src") if image_tag else None
        if not image_src:
            raise ImageMissingError("image src not found")

        return LotrCardObject(
            title=title,
            set_no=set_no,
            card_no=card_no,
            image_url=base_url + image_src,
            image_path=sanitize_filename(title) + self._get_extension(image_src),
            image_name=image_tag.get("title", ""),
            props=self._parse_props(soup),
        )

    def _parse_props(self, soup: bs4.BeautifulSoup) -> Dict[str, str]:
        """
        Parse the key/value rows of the first inline table
        :param soup: Parsed page
        :return: Normalized key to single line value
        """
        props: Dict[str, str] = {}

        table = soup.select_one(self.PROPS_TABLE_SELECTOR)
        if not table:
            return props

        for row in table.select("tr"):
            key_cell = row.select_one(self.PROPS_KEY_SELECTOR)
            value_cell = row.select_one(self.PROPS_VALUE_SELECTOR)
            key = key_cell.get_text().strip() if key_cell else ""
            value = value_cell.get_text().strip() if value_cell else ""
            if not key or not value:
                continue

            normalized_key = normalize_key(key)
            if not normalized_key:
                LOGGER.debug(f"Dropping property with unusable label {key!r}")
                continue
            props[normalized_key] = normalize_spaces(value)

        return props

    @staticmethod
    def _get_extension(image_src: str) -> str:
        """
        Extension of the image file, ignoring any query string
        :param image_src: Scraped src, e.g. /_media/foo.jpg?w=200&tok=ab12
        :return: Lowercase extension with its dot, or empty
        """
        return posixpath.splitext(urllib.parse.urlsplit(image_src).path)[1].lower()

    @staticmethod
    def _make_soup(card_html: CardHtml) -> bs4.BeautifulSoup:
        """
        Build the DOM, turning read or parser failures into HtmlParseError
        :param card_html: Page body
        :return: Parsed page
        """
        try:
            if hasattr(card_html, "read"):
                card_html = card_html.read()  # type: ignore[union-attr]
            return bs4.BeautifulSoup(card_html, "html.parser")
        except (OSError, UnicodeDecodeError, ParserRejectedMarkup) as error:
            raise HtmlParseError(f"parse html: {error}") from error
