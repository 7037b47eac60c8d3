# refs.py -- Ref name validation
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

"""Ref name validation.

Implements the rules of git-check-ref-format[1], plus the extra restrictions
needed to store a ref as a loose file on the given platform.

[1] http://www.kernel.org/pub/software/scm/git/docs/git-check-ref-format.html
"""

__all__ = [
    "LOCK_SUFFIX",
    "REFLOG_QUERY",
    "check_ref_name",
    "is_valid_ref_name",
    "ref_name_error",
]

from typing import Optional, Union

from . import log_utils
from .errors import RefFormatError
from .platform import (
    FORBIDDEN_CHARS,
    PlatformMode,
    PlatformRules,
    is_reserved_name,
    rules_for,
)

logger = log_utils.getLogger(__name__)

RefNameLike = Union[str, bytes, None]

LOCK_SUFFIX = ".lock"
REFLOG_QUERY = "@{"


def _component_error(component: str, rules: PlatformRules) -> Optional[str]:
    if not component:
        return "empty path component"
    if component.startswith("."):
        return f"component {component!r} starts with '.'"
    if component.endswith("."):
        return f"component {component!r} ends with '.'"
    if ".." in component:
        return f"component {component!r} contains '..'"
    if component.endswith(LOCK_SUFFIX):
        return f"component {component!r} ends with {LOCK_SUFFIX!r}"
    if REFLOG_QUERY in component:
        return f"component {component!r} contains reflog syntax {REFLOG_QUERY!r}"
    for c in component:
        if ord(c) < 0x20:
            return f"control character {c!r}"
        if c in FORBIDDEN_CHARS or c in rules.forbidden_chars:
            return f"forbidden character {c!r}"
    if is_reserved_name(component, rules):
        return f"component {component!r} is a reserved device name"
    return None


def ref_name_error(
    name: RefNameLike, platform: PlatformMode = PlatformMode.UNIX
) -> Optional[str]:
    """Find the first rule a ref name breaks.

    Args:
      name: Ref name, as text or UTF-8 encoded bytes
      platform: Platform whose filesystem rules apply
    Returns: Description of the problem, or None if the name is valid
    """
    if isinstance(name, bytes):
        try:
            name = name.decode("utf-8")
        except UnicodeDecodeError:
            return "not valid UTF-8"
    if not name:
        return "empty ref name"
    components = name.split("/")
    if len(components) < 2:
        return "ref name needs at least two components"
    rules = rules_for(platform)
    for component in components:
        error = _component_error(component, rules)
        if error is not None:
            return error
    return None


def is_valid_ref_name(
    name: RefNameLike, platform: PlatformMode = PlatformMode.UNIX
) -> bool:
    """Check if a ref name is correctly formatted.

    Args:
      name: The ref name to check
      platform: Platform whose filesystem rules apply
    Returns: True if name is valid, False otherwise
    """
    return ref_name_error(name, platform) is None


def check_ref_name(
    name: RefNameLike, platform: PlatformMode = PlatformMode.UNIX
) -> None:
    """Check a ref name, raising if it is not valid.

    Raises:
      RefFormatError: if the name breaks any rule
    """
    error = ref_name_error(name, platform)
    if error is not None:
        logger.debug("Rejecting ref name %r: %s", name, error)
        raise RefFormatError(name, error)
