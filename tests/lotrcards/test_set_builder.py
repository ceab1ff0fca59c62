"""Tests for lotrcards.set_builder and the main entry point."""

import logging

import pytest
import requests
import responses

from lotrcards import constants
from lotrcards.lotr_config import LotrConfig
from lotrcards.providers import LotrCatalogProvider
from lotrcards.set_builder import build_lotr_set, build_lotr_sets


@pytest.fixture
def provider(base_url):
    return LotrCatalogProvider.__wrapped__(base_url=base_url)


@pytest.fixture
def sams_pack_page(build_card_html):
    # Heading token disagrees with the catalog position on purpose
    image = '<p><span><a href="/x"><img class="media" src="/_media/pack.jpg" title="Pack"></a></span></p>'
    rows = '<tr><td class="col0">Rarity</td><td class="col1">C</td></tr>'
    return build_card_html(heading="Sam's Pack! (9C9)", rows=rows, image=image)


def test_build_lotr_sets(tmp_path, provider, card_page, sams_pack_page, mocked_responses):
    mocked_responses.add(responses.GET, "https://whatever.com/lotr01001", body=card_page)
    mocked_responses.add(responses.GET, "https://whatever.com/lotr01002", body=sams_pack_page)
    mocked_responses.add(responses.GET, "https://whatever.com/lotr01003", status=404)
    mocked_responses.add(responses.GET, "https://whatever.com/lotr02001", status=500)
    mocked_responses.add(responses.GET, "https://whatever.com/_media/foo.jpg", body=b"ring")
    mocked_responses.add(responses.GET, "https://whatever.com/_media/pack.jpg", body=b"pack")
    # Nothing registered for set 3, the first request fails to connect

    written = build_lotr_sets(tmp_path, provider=provider)

    assert written == [
        tmp_path / "01" / "01001_the_one_ring_isildurs_bane.md",
        tmp_path / "01" / "01002_sams_pack.md",
    ]
    assert (tmp_path / "01" / "the_one_ring_isildurs_bane.jpg").read_bytes() == b"ring"
    assert (tmp_path / "01" / "sams_pack.jpg").read_bytes() == b"pack"
    assert not (tmp_path / "02").exists()
    assert not (tmp_path / "09").exists()

    sams_pack = (tmp_path / "01" / "01002_sams_pack.md").read_text(encoding="utf-8")
    assert "set_no: 01\n" in sams_pack
    assert "card_no: 002\n" in sams_pack
    assert 'rarity: "C"\n' in sams_pack

    requested = [call.request.url for call in mocked_responses.calls]
    assert requested[-1] == "https://whatever.com/lotr03001"
    assert "https://whatever.com/lotr02002" not in requested


def test_image_failure_skips_markdown(tmp_path, provider, card_page, sams_pack_page, mocked_responses):
    mocked_responses.add(responses.GET, "https://whatever.com/lotr01001", body=card_page)
    mocked_responses.add(
        responses.GET,
        "https://whatever.com/_media/foo.jpg",
        body=requests.exceptions.ConnectionError("refused"),
    )
    mocked_responses.add(responses.GET, "https://whatever.com/lotr01002", body=sams_pack_page)
    mocked_responses.add(responses.GET, "https://whatever.com/_media/pack.jpg", body=b"pack")
    mocked_responses.add(responses.GET, "https://whatever.com/lotr01003", status=404)

    written = build_lotr_set(1, tmp_path, provider)

    assert written == [tmp_path / "01" / "01002_sams_pack.md"]
    assert not list(tmp_path.glob("01/01001_*"))


def test_extraction_failure_ends_set(tmp_path, provider, build_card_html, mocked_responses):
    mocked_responses.add(
        responses.GET,
        "https://whatever.com/lotr02001",
        body=build_card_html(heading="Legendary Card"),
    )
    mocked_responses.add(responses.GET, "https://whatever.com/lotr02002", body="unused")

    assert build_lotr_set(2, tmp_path, provider) == []

    assert len(mocked_responses.calls) == 1
    assert list(tmp_path.iterdir()) == []


@pytest.fixture
def fresh_config(tmp_path, monkeypatch):
    """Point the entry point at a temporary .env and log folder."""
    monkeypatch.setattr(constants, "LOG_PATH", tmp_path / "logs")
    monkeypatch.setattr(constants, "ENV_FILE_PATH", tmp_path / ".env")
    monkeypatch.setattr(LotrConfig, "_instance", None)
    for option in ("BASE_URL", "LOTR_DEBUG"):
        monkeypatch.setenv(option, "")
        monkeypatch.delenv(option)
    root_level = logging.getLogger().level
    yield tmp_path / ".env"
    logging.getLogger().setLevel(root_level)


def test_main_without_env_file(fresh_config):
    from lotrcards.__main__ import main

    with pytest.raises(SystemExit) as error:
        main()

    assert error.value.code == 1


def test_main_builds_all_sets(fresh_config, mocker):
    fresh_config.write_text("BASE_URL=https://whatever.com\n")
    build = mocker.patch("lotrcards.set_builder.build_lotr_sets", return_value=[])

    from lotrcards.__main__ import main

    main()

    build.assert_called_once_with(constants.OUTPUT_PATH)


def test_main_applies_debug_from_env_file(fresh_config, mocker):
    fresh_config.write_text("BASE_URL=https://whatever.com\nLOTR_DEBUG=true\n")
    mocker.patch("lotrcards.set_builder.build_lotr_sets", return_value=[])

    from lotrcards.__main__ import main

    main()

    assert logging.getLogger().level == logging.DEBUG


def test_wide_heading_token_does_not_end_set(tmp_path, provider, build_card_html, mocked_responses):
    mocked_responses.add(
        responses.GET,
        "https://whatever.com/lotr01001",
        body=build_card_html(heading="Promo Ring (100P1234)"),
    )
    mocked_responses.add(responses.GET, "https://whatever.com/_media/foo.jpg", body=b"ring")
    mocked_responses.add(responses.GET, "https://whatever.com/lotr01002", status=404)

    written = build_lotr_set(1, tmp_path, provider)

    assert written == [tmp_path / "01" / "01001_promo_ring.md"]
