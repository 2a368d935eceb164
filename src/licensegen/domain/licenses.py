from __future__ import annotations

"""
License Catalogue.

Read-only table of the supported license templates. Entries are keyed by a
lower-case identifier (e.g. 'apache-2.0') and also resolvable by their SPDX
identifier.
"""

from dataclasses import dataclass
from string import Template
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from licensegen.domain import license_texts as texts

# -----------------------------------------------------------------------------
# CATALOGUE MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class LicenseInfo:
    """
    Static description of one license template.

    Attributes:
        key: Lower-case catalogue identifier.
        name: Human readable license name.
        spdx: SPDX license identifier.
        osi_approved: Whether the license is OSI approved.
        template: Body with '${year}' and '${name}' placeholders.
    """
    key: str
    name: str
    spdx: str
    osi_approved: bool
    template: Template

    def render(self, name: str, year: str) -> str:
        """Substitute the copyright holder and year into the body."""
        return self.template.safe_substitute(name=name, year=year)


def _entry(key: str, name: str, spdx: str, template: Template, osi: bool = True) -> LicenseInfo:
    return LicenseInfo(key=key, name=name, spdx=spdx, osi_approved=osi, template=template)


LICENSES: Mapping[str, LicenseInfo] = MappingProxyType({
    info.key: info
    for info in (
        _entry("mit", "MIT License", "MIT", texts.MIT_TEXT),
        _entry("apache-2.0", "Apache License 2.0", "Apache-2.0", texts.APACHE_2_0_TEXT),
        _entry("gpl-3.0", "GNU General Public License v3.0", "GPL-3.0-only", texts.GPL_3_0_TEXT),
        _entry("gpl-2.0", "GNU General Public License v2.0", "GPL-2.0-only", texts.GPL_2_0_TEXT),
        _entry(
            "bsd-2-clause", 'BSD 2-Clause "Simplified" License', "BSD-2-Clause",
            texts.BSD_2_CLAUSE_TEXT,
        ),
        _entry(
            "bsd-3-clause", 'BSD 3-Clause "New" or "Revised" License', "BSD-3-Clause",
            texts.BSD_3_CLAUSE_TEXT,
        ),
        _entry("isc", "ISC License", "ISC", texts.ISC_TEXT),
        _entry("mpl-2.0", "Mozilla Public License 2.0", "MPL-2.0", texts.MPL_2_0_TEXT),
        _entry(
            "lgpl-3.0", "GNU Lesser General Public License v3.0", "LGPL-3.0-only",
            texts.LGPL_3_0_TEXT,
        ),
        _entry(
            "agpl-3.0", "GNU Affero General Public License v3.0", "AGPL-3.0-only",
            texts.AGPL_3_0_TEXT,
        ),
        _entry("unlicense", "The Unlicense", "Unlicense", texts.UNLICENSE_TEXT),
        _entry(
            "cc0-1.0", "Creative Commons Zero v1.0 Universal", "CC0-1.0",
            texts.CC0_1_0_TEXT, osi=False,
        ),
        _entry("0bsd", "Zero-Clause BSD", "0BSD", texts.ZERO_BSD_TEXT),
    )
})

_BY_SPDX: Mapping[str, LicenseInfo] = MappingProxyType(
    {info.spdx.lower(): info for info in LICENSES.values()}
)

# -----------------------------------------------------------------------------
# LOOKUP API
# -----------------------------------------------------------------------------

def get_license(identifier: Optional[str]) -> Optional[LicenseInfo]:
    """
    Resolve a catalogue entry by key or SPDX identifier, case-insensitively.

    Args:
        identifier: User supplied license identifier (e.g. 'MIT', 'gpl-3.0',
                    'GPL-3.0-only').

    Returns:
        Optional[LicenseInfo]: The matching entry, or None when unknown.
    """
    key = (identifier or "").strip().lower()
    if not key:
        return None
    return LICENSES.get(key) or _BY_SPDX.get(key)


def list_licenses() -> List[Dict[str, Any]]:
    """Return catalogue rows in declaration order, as emitted by '--list --json'."""
    return [
        {
            "id": info.key,
            "name": info.name,
            "spdx": info.spdx,
            "osiApproved": info.osi_approved,
        }
        for info in LICENSES.values()
    ]
