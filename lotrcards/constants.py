"""
LOTR Cards constants that cannot be changed and are hardcoded intentionally
"""

import pathlib
from typing import Tuple

WORKING_DIR: pathlib.Path = pathlib.Path.cwd()
ENV_FILE_PATH: pathlib.Path = WORKING_DIR.joinpath(".env")
OUTPUT_PATH: pathlib.Path = WORKING_DIR.joinpath("output")
LOG_PATH: pathlib.Path = WORKING_DIR.joinpath("lotr_logs")

# Catalog sections, scraped in this order
SETS_TO_SCRAPE: Tuple[int, ...] = (1, 2, 3)
CARD_URL_PREFIX: str = "lotr"

DIRECTORY_MODE: int = 0o755
FILE_MODE: int = 0o644
DOWNLOAD_CHUNK_SIZE: int = 8192

# Inventory fields appended, empty, to every card's front-matter
INVENTORY_FIELDS: Tuple[str, ...] = (
    "amount",
    "value",
    "sold_price",
    "offer_price",
    "total",
)
CURRENCY_SYMBOL: str = "€"
