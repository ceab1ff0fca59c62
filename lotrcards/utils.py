"""
LOTR Cards simple utilities
"""

import logging
import os
import re
import time

from . import constants

LOGGER = logging.getLogger(__name__)

WHITESPACE_REGEX = re.compile(r"[ \t\n\r]+")
NON_ALPHANUMERIC_REGEX = re.compile(r"[^a-z0-9]+")


def init_logger() -> None:
    """
    Initialize the main system logger
    """
    constants.LOG_PATH.mkdir(parents=True, exist_ok=True)

    start_time = time.strftime("%Y-%m-%d_%H.%M.%S")

    logging.basicConfig(
        level=get_log_level(),
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(
                str(constants.LOG_PATH.joinpath(f"lotrcards_{start_time}.log")),
                encoding="utf-8",
            ),
        ],
    )
    logging.getLogger("urllib3").setLevel(logging.ERROR)


def get_log_level() -> int:
    """
    Logging level requested through LOTR_DEBUG
    :return: DEBUG or INFO
    """
    if os.environ.get("LOTR_DEBUG", "").lower() in ["true", "1"]:
        return logging.DEBUG
    return logging.INFO


def refresh_log_level() -> None:
    """
    Re-apply LOTR_DEBUG to the root logger, once .env has been loaded
    """
    logging.getLogger().setLevel(get_log_level())


def normalize_spaces(text: str) -> str:
    """
    Collapse every run of whitespace into a single space and trim the ends
    :param text: Text to clean up
    :return: Text on a single line
    """
    return WHITESPACE_REGEX.sub(" ", text).strip(" ")


def normalize_key(key: str) -> str:
    """
    Convert "Game Text:" => "game_text"
    An empty result means the key carries nothing usable
    :param key: Label to convert
    :return: Snake case key
    """
    return NON_ALPHANUMERIC_REGEX.sub("_", key.lower()).strip("_")


def sanitize_filename(text: str) -> str:
    """
    Convert "Isildur's Bane" => "isildurs_bane"
    Apostrophes are dropped before the collapse so possessives stay one word
    :param text: Text to convert
    :return: Filesystem safe slug
    """
    return normalize_key(text.replace("'", ""))
