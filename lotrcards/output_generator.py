"""
LOTR Cards output generator to write out cards as Markdown with front-matter
"""
import logging
import os
import pathlib
from typing import List

from . import constants
from .classes import LotrCardObject
from .errors import WriteFailedError

LOGGER = logging.getLogger(__name__)


def build_card_markdown(card: LotrCardObject) -> str:
    """
    Render a card as front-matter followed by a title heading
    Values are not escaped, a double quote in a value breaks the YAML
    :param card: Card to render
    :return: File contents
    """
    lines: List[str] = [
        "---",
        f'title: "{card.title}"',
        f"set_no: {card.set_no}",
        f"card_no: {card.card_no}",
        f'photo: "[[./{card.image_path}|{card.image_name}]]"',
    ]
    lines.extend(f'{key}: "{value}"' for key, value in card.props.items())
    lines.extend(f"{field}:" for field in constants.INVENTORY_FIELDS)
    lines.append(f"currency: {constants.CURRENCY_SYMBOL}")
    lines.append("---")
    lines.append("")
    lines.append(f"# {card.title}")

    return "\n".join(lines) + "\n"


def get_card_file_path(output_root: pathlib.Path, card: LotrCardObject) -> pathlib.Path:
    """
    Where a card's Markdown lives, e.g. output/01/01001_the_one_ring.md
    :param output_root: Output folder
    :param card: Card to place
    :return: Markdown path
    """
    return pathlib.Path(output_root).joinpath(
        card.set_no, f"{card.set_no}{card.card_no}_{card.get_slug()}.md"
    )


def write_card(output_root: pathlib.Path, card: LotrCardObject) -> pathlib.Path:
    """
    Dump a card to its Markdown file under output_root/<set_no>/
    :param output_root: Output folder
    :param card: Card to write
    :return: Path written to
    """
    write_file = get_card_file_path(output_root, card)

    try:
        write_file.parent.mkdir(
            mode=constants.DIRECTORY_MODE, parents=True, exist_ok=True
        )
        with write_file.open("w", encoding="utf-8", newline="\n") as file:
            file.write(build_card_markdown(card))
        os.chmod(write_file, constants.FILE_MODE)
    except OSError as error:
        raise WriteFailedError(f"write {write_file}: {error}") from error

    LOGGER.debug(f"Wrote {write_file}")
    return write_file
