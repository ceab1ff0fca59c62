"""
LOTR Cards Main Executor
"""

import logging
import sys

from lotrcards.utils import init_logger, refresh_log_level

init_logger()
LOGGER: logging.Logger = logging.getLogger(__name__)


def main() -> None:
    """
    LOTR Cards safe main call
    """
    from lotrcards import __version__
    from lotrcards.errors import EnvLoadError
    from lotrcards.lotr_config import LotrConfig
    from lotrcards.set_builder import build_lotr_sets

    try:
        config = LotrConfig()
    except EnvLoadError as error:
        LOGGER.fatal(str(error))
        sys.exit(1)

    # LOTR_DEBUG may only have arrived with .env
    refresh_log_level()

    LOGGER.info(f"Starting LOTR Cards {__version__} against {config.base_url}")
    build_lotr_sets(config.output_path)


if __name__ == "__main__":
    main()
