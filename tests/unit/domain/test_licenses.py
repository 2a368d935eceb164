from __future__ import annotations

"""Unit tests for the license catalogue."""

import pytest

from licensegen.domain.licenses import LICENSES, get_license, list_licenses


def test_catalogue_contents() -> None:
    assert len(LICENSES) == 13
    assert {info.spdx for info in LICENSES.values()} == {
        "MIT", "Apache-2.0", "GPL-3.0-only", "GPL-2.0-only", "BSD-2-Clause",
        "BSD-3-Clause", "ISC", "MPL-2.0", "LGPL-3.0-only", "AGPL-3.0-only",
        "Unlicense", "CC0-1.0", "0BSD",
    }


def test_catalogue_is_read_only() -> None:
    with pytest.raises(TypeError):
        LICENSES["new"] = LICENSES["mit"]  # type: ignore[index]


@pytest.mark.parametrize("identifier, key", [
    ("mit", "mit"),
    ("MIT", "mit"),
    (" Apache-2.0 ", "apache-2.0"),
    ("GPL-3.0-only", "gpl-3.0"),
    ("0bsd", "0bsd"),
])
def test_lookup(identifier: str, key: str) -> None:
    info = get_license(identifier)
    assert info is not None
    assert info.key == key


@pytest.mark.parametrize("identifier", ["", None, "wtfpl", "gpl"])
def test_unknown_lookup(identifier) -> None:
    assert get_license(identifier) is None


def test_render_substitutes_holder_and_year() -> None:
    text = LICENSES["bsd-3-clause"].render("Acme Corp", "2023")
    assert "Copyright (c) 2023, Acme Corp" in text


def test_no_placeholder_survives_rendering() -> None:
    for info in LICENSES.values():
        text = info.render("Jane Doe", "2024")
        assert "${" not in text, info.key
        assert text.endswith("\n")


def test_unlicense_has_no_copyright_line() -> None:
    assert "Jane Doe" not in LICENSES["unlicense"].render("Jane Doe", "2024")


def test_list_rows() -> None:
    rows = list_licenses()
    assert rows[0] == {"id": "mit", "name": "MIT License", "spdx": "MIT", "osiApproved": True}
    cc0 = next(r for r in rows if r["id"] == "cc0-1.0")
    assert cc0["osiApproved"] is False
