"""Pytest configuration and fixtures for LOTR Cards tests."""

from pathlib import Path
from typing import Callable, Generator

import pytest
import responses

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DEFAULT_HEADING = "The One Ring, Isildur's Bane (1R1)"
DEFAULT_IMAGE = (
    '<p><span><a href="/_detail/foo.jpg">'
    '<img class="media" src="/_media/foo.jpg" title="The One Ring">'
    "</a></span></p>"
)


def load_fixture(name: str) -> bytes:
    """Load an HTML fixture file and return its raw bytes."""
    return (FIXTURES_DIR / name).read_bytes()


@pytest.fixture
def base_url() -> str:
    """Catalog origin used across tests."""
    return "https://whatever.com"


@pytest.fixture
def card_page() -> bytes:
    """The canonical card page."""
    return load_fixture("lotr01001.html")


@pytest.fixture
def build_card_html() -> Callable[..., str]:
    """Assemble a minimal catalog page from heading, table rows and image markup."""

    def _build(
        heading: str = DEFAULT_HEADING, rows: str = "", image: str = DEFAULT_IMAGE
    ) -> str:
        return (
            "<html><body>"
            f'<h1><a href="/lotr01001">{heading}</a></h1>'
            f"{image}"
            f'<table class="inline">{rows}</table>'
            "</body></html>"
        )

    return _build


@pytest.fixture
def mocked_responses() -> Generator[responses.RequestsMock, None, None]:
    """Intercept every requests call; unregistered URLs raise ConnectionError."""
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps
