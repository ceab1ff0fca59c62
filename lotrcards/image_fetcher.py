"""
Card image downloader
"""
import logging
import os
import pathlib
from typing import Optional

import requests

from . import constants
from .errors import FetchFailedError
from .http_session import http_session

LOGGER = logging.getLogger(__name__)


def download_image(
    url: str,
    directory: pathlib.Path,
    filename: str,
    session: Optional[requests.Session] = None,
) -> pathlib.Path:
    """
    Stream an image to directory/filename
    Non-2xx bodies are written as well; they are only logged
    :param url: Absolute image URL
    :param directory: Folder to store the image in, created if missing
    :param filename: Name of the stored file
    :param session: Session to download with, a private one is opened
        and closed when omitted
    :return: Absolute path of the stored image
    """
    image_path = pathlib.Path(directory).joinpath(filename).resolve()

    if session is None:
        with http_session() as owned_session:
            return _store_image(url, image_path, owned_session)
    return _store_image(url, image_path, session)


def _store_image(
    url: str, image_path: pathlib.Path, session: requests.Session
) -> pathlib.Path:
    """
    Download url into image_path, wrapping any failure as FetchFailedError
    :param url: Absolute image URL
    :param image_path: Absolute target path
    :param session: Session to download with
    :return: image_path
    """
    try:
        image_path.parent.mkdir(
            mode=constants.DIRECTORY_MODE, parents=True, exist_ok=True
        )
        with session.get(url, stream=True) as response:
            if not response.ok:
                LOGGER.warning(
                    f"{url} returned HTTP {response.status_code}, storing body anyway"
                )
            with image_path.open("wb") as file:
                for chunk in response.iter_content(
                    chunk_size=constants.DOWNLOAD_CHUNK_SIZE
                ):
                    file.write(chunk)
        os.chmod(image_path, constants.FILE_MODE)
    except (requests.RequestException, OSError) as error:
        raise FetchFailedError(f"download {url}: {error}") from error

    LOGGER.debug(f"Stored {url} at {image_path}")
    return image_path
