# normalize.py -- Turn free-form text into a branch name
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

"""Branch name normalization for free-form text such as issue titles."""

__all__ = [
    "normalize_branch_name",
]

from typing import Optional

from . import log_utils
from .platform import PLATFORM_RULES, PlatformMode, is_reserved_name

logger = log_utils.getLogger(__name__)

# Characters that may sit between two whitespace runs and stand for a break
# in the text, as in "Bug 123 - Title" or "Bug 123 :: Title".
_BREAK_CHARS = frozenset("-:_")


def _is_word_char(c: str) -> bool:
    return c == "_" or c.isalnum()


def normalize_branch_name(text: Optional[str]) -> Optional[str]:
    """Normalize text into a name usable as the last component of a branch.

    Whitespace becomes "_" and breaks like " - " or " :: " become "-".
    Anything other than letters, digits, "-" and "_" is dropped, runs of the
    same separator are collapsed and leading separators are removed.

    The result is always valid as ``refs/heads/<result>`` on every platform,
    and normalizing it again returns it unchanged.

    Args:
      text: The text to normalize
    Returns:
      The normalized name; "" if nothing usable is left, None if text is None
    """
    if not text:
        return text
    text = text.strip()
    out: list[str] = []

    def emit_separator(sep: str) -> None:
        # Separators before the first word character are dropped, as are
        # repeats of the separator just written.
        if out and out[-1] != sep:
            out.append(sep)

    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if c.isspace():
            j = i
            while j < n and text[j].isspace():
                j += 1
            k = j
            while k < n and text[k] in _BREAK_CHARS:
                k += 1
            if j < k < n and text[k].isspace():
                run = text[j:k]
                emit_separator("-" if ("-" in run or ":" in run) else "_")
                while k < n and text[k].isspace():
                    k += 1
                i = k
                continue
            if j - i == 1:
                emit_separator("_")
            i = j
        elif c in "-:":
            emit_separator("-")
            i += 1
        elif c == "_":
            emit_separator("_")
            i += 1
        else:
            if _is_word_char(c):
                out.append(c)
            i += 1

    result = "".join(out)
    if is_reserved_name(result, PLATFORM_RULES[PlatformMode.WINDOWS]):
        result += "_"
    if not result:
        logger.debug("Nothing left of %r after normalization", text)
    return result
