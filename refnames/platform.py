# platform.py -- Platform specific ref name rules
# Copyright (C) 2026 The refnames developers
#
# SPDX-License-Identifier: Apache-2.0 OR GPL-2.0-or-later
# refnames is dual-licensed under the Apache License, Version 2.0 and the GNU
# General Public License as published by the Free Software Foundation; version 2.0
# or (at your option) any later version. You can redistribute it and/or
# modify it under the terms of either of these two licenses.
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# You should have received a copy of the licenses; if not, see
# <http://www.gnu.org/licenses/> for a copy of the GNU General Public License
# and <http://www.apache.org/licenses/LICENSE-2.0> for a copy of the Apache
# License, Version 2.0.
#

"""Platform modes and the character tables used to check ref names.

Refs may be stored as loose files, so a name that cannot be represented as a
path on the host filesystem is not a usable ref name there. The rules that
depend on the filesystem are kept in :data:`PLATFORM_RULES`; everything else
applies on every platform.
"""

__all__ = [
    "FORBIDDEN_CHARS",
    "PLATFORM_RULES",
    "PlatformMode",
    "PlatformRules",
    "WINDOWS_RESERVED_NAMES",
    "get_platform_mode",
    "is_reserved_name",
    "rules_for",
]

import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .config import Config


class PlatformMode(str, Enum):
    """Filesystem flavour a ref name has to be valid on."""

    UNIX = "unix"
    WINDOWS = "windows"

    @classmethod
    def from_string(cls, s: str) -> "PlatformMode":
        """Parse a platform mode from its name.

        Args:
            s: Mode name, e.g. "unix" or "windows"

        Returns:
            PlatformMode enum value

        Raises:
            ValueError: If the name is not recognized
        """
        s = s.strip().lower()
        aliases = {
            "posix": cls.UNIX,
            "nt": cls.WINDOWS,
            "win32": cls.WINDOWS,
        }
        if s in aliases:
            return aliases[s]
        try:
            return cls(s)
        except ValueError:
            raise ValueError(f"Unknown platform mode: {s}") from None


# Characters that are never allowed in a ref name. Control characters are
# checked separately by code point.
FORBIDDEN_CHARS = frozenset(
    [
        " ",
        "\x7f",
        # revision syntax
        "^",
        "~",
        ":",
        # shell globs
        "?",
        "*",
        "[",
        # not portable to Windows, so rejected everywhere
        "\\",
    ]
)

WINDOWS_RESERVED_NAMES = frozenset(
    ["con", "prn", "aux", "nul"]
    + [f"com{i}" for i in range(1, 10)]
    + [f"lpt{i}" for i in range(1, 10)]
)


@dataclass(frozen=True)
class PlatformRules:
    """Extra restrictions a platform puts on each ref name component."""

    forbidden_chars: frozenset[str] = frozenset()
    reserved_names: frozenset[str] = frozenset()

    def merge(self, other: "PlatformRules") -> "PlatformRules":
        return PlatformRules(
            forbidden_chars=self.forbidden_chars | other.forbidden_chars,
            reserved_names=self.reserved_names | other.reserved_names,
        )


PLATFORM_RULES: dict[PlatformMode, PlatformRules] = {
    PlatformMode.UNIX: PlatformRules(),
    PlatformMode.WINDOWS: PlatformRules(
        forbidden_chars=frozenset('"<>|'),
        reserved_names=WINDOWS_RESERVED_NAMES,
    ),
}


def _merge_rules(rules: Iterable[PlatformRules]) -> PlatformRules:
    ret = PlatformRules()
    for r in rules:
        ret = ret.merge(r)
    return ret


_ALL_RULES = _merge_rules(PLATFORM_RULES.values())


def rules_for(platform: object) -> PlatformRules:
    """Look up the rules for a platform mode.

    Values that are not a known mode get the rules of every platform
    combined.
    """
    try:
        return PLATFORM_RULES[PlatformMode(platform)]
    except (ValueError, TypeError):
        return _ALL_RULES


def is_reserved_name(component: str, rules: PlatformRules) -> bool:
    """Check whether a path component names a reserved device.

    Only the part before the first dot counts, so "con.txt" is reserved
    as well.
    """
    if not rules.reserved_names:
        return False
    base = component.split(".", 1)[0]
    return base.lower() in rules.reserved_names


def get_platform_mode(config: Optional["Config"] = None) -> PlatformMode:
    """Determine the platform mode for the running host.

    Args:
        config: Optional configuration; core.protectNTFS overrides
            the host check when set.

    Returns:
        PlatformMode.WINDOWS if NTFS rules apply, PlatformMode.UNIX otherwise
    """
    protect_ntfs = os.name == "nt"
    if config is not None:
        protect_ntfs = config.get_boolean(("core",), "protectNTFS", protect_ntfs)
    if protect_ntfs:
        return PlatformMode.WINDOWS
    return PlatformMode.UNIX
