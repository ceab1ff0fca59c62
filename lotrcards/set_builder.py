"""
LOTR Cards set builder, walks each catalog section until it runs out of cards
"""
import itertools
import logging
import pathlib
from typing import Iterable, List, Optional

import requests

from . import constants
from .errors import (
    CardExtractionError,
    FetchFailedError,
    HttpNonOkError,
    WriteFailedError,
)
from .image_fetcher import download_image
from .output_generator import write_card
from .providers import LotrCatalogProvider

LOGGER = logging.getLogger(__name__)


def build_lotr_set(
    set_number: int,
    output_path: pathlib.Path,
    provider: Optional[LotrCatalogProvider] = None,
) -> List[pathlib.Path]:
    """
    Scrape one section, card 1 upwards, until the catalog stops answering
    :param set_number: Catalog section
    :param output_path: Output folder
    :param provider: Catalog to read from
    :return: Markdown files written
    """
    provider = provider or LotrCatalogProvider()
    LOGGER.info(f"Scraping set {set_number}")

    written: List[pathlib.Path] = []
    for card_index in itertools.count(1):
        try:
            card = provider.get_card(set_number, card_index)
        except HttpNonOkError as error:
            LOGGER.info(f"End of set {set_number}: {error}")
            break
        except requests.RequestException as error:
            LOGGER.error(
                f"Error fetching {provider.build_card_url(set_number, card_index)}: {error}"
            )
            break
        except CardExtractionError as error:
            LOGGER.error(
                f"Error scraping {provider.build_card_url(set_number, card_index)}: {error}"
            )
            break

        # Catalog position wins over what the heading claims
        card.set_no = f"{set_number:02d}"
        card.card_no = f"{card_index:03d}"

        set_dir = pathlib.Path(output_path).joinpath(card.set_no)
        try:
            download_image(card.image_url, set_dir, card.image_path, provider.session)
        except FetchFailedError as error:
            LOGGER.warning(f"Failed to download image for {card.title}: {error}")
            continue

        try:
            markdown_path = write_card(output_path, card)
        except WriteFailedError as error:
            LOGGER.warning(f"Failed to write markdown for {card.title}: {error}")
            continue

        LOGGER.info(f"Card {card.title} saved: {markdown_path}")
        written.append(markdown_path)

    return written


def build_lotr_sets(
    output_path: pathlib.Path,
    sets_to_build: Iterable[int] = constants.SETS_TO_SCRAPE,
    provider: Optional[LotrCatalogProvider] = None,
) -> List[pathlib.Path]:
    """
    Scrape each section in order
    :param output_path: Output folder
    :param sets_to_build: Sections to scrape
    :param provider: Catalog to read from
    :return: Markdown files written
    """
    provider = provider or LotrCatalogProvider()

    written: List[pathlib.Path] = []
    for set_number in sets_to_build:
        written.extend(build_lotr_set(set_number, output_path, provider))

    LOGGER.info(f"Wrote {len(written)} cards to {output_path}")
    return written
