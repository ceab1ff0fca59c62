"""
LOTR Cards Configuration Service
"""

import logging
import os
import pathlib
from typing import Optional

import dotenv
from singleton_decorator import singleton

from . import constants
from .errors import EnvLoadError


@singleton
class LotrConfig:
    """
    Configuration Class that loads the .env file into the environment
    and provides the contents for the running program
    """

    logger: logging.Logger
    env_path: pathlib.Path
    base_url: str
    http_timeout: Optional[float]
    output_path: pathlib.Path

    def __init__(self, env_path: Optional[pathlib.Path] = None):
        self.logger = logging.getLogger(__name__)
        self.env_path = env_path or constants.ENV_FILE_PATH

        self.logger.info(f"Loading configuration from {self.env_path}")
        self.__load_env_file(self.env_path)

        self.base_url = os.environ.get("BASE_URL", "")
        if not self.base_url:
            raise EnvLoadError(f"BASE_URL is not set after loading {self.env_path}")

        self.http_timeout = self.__get_float("LOTR_HTTP_TIMEOUT")
        self.output_path = constants.OUTPUT_PATH

    @staticmethod
    def __load_env_file(env_path: pathlib.Path) -> None:
        """
        Load KEY=value pairs into os.environ without clobbering existing values
        :param env_path: Path to the .env file
        """
        if not env_path.is_file():
            raise EnvLoadError(f"Error loading .env file: {env_path} not found")

        try:
            dotenv.load_dotenv(dotenv_path=env_path, override=False)
        except (OSError, UnicodeDecodeError) as error:
            raise EnvLoadError(f"Error loading .env file: {error}") from error

    def __get_float(self, option: str) -> Optional[float]:
        """
        Read an optional number from the environment
        :param option: Environment variable name
        :return: Value, or None if unset or invalid
        """
        value = os.environ.get(option, "").strip()
        if not value:
            return None

        try:
            return float(value)
        except ValueError:
            self.logger.warning(f"Ignoring {option}={value!r}, not a number")
            return None
