# config.py - Reading of git-style configuration files
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

"""Reading of git-style configuration files.

Only the subset of the format needed to pick up settings such as
core.protectNTFS is supported: sections, quoted subsections, comments and
quoted values with escapes. Include directives and line continuations are
not handled.
"""

__all__ = [
    "Config",
    "ConfigDict",
    "ConfigFile",
]

import os
from collections.abc import Iterator
from typing import IO, Optional, Union, overload

Section = tuple[str, ...]
SectionLike = Union[str, tuple[str, ...]]

_TRUE_VALUES = ("true", "yes", "on", "1")
_FALSE_VALUES = ("false", "no", "off", "0")


class Config:
    """A git-style configuration."""

    def get(self, section: SectionLike, name: str) -> str:
        """Retrieve the contents of a configuration setting.

        Args:
          section: Tuple with section name and optional subsection name
          name: Variable name
        Returns:
          Contents of the setting
        Raises:
          KeyError: if the value is not set
        """
        raise NotImplementedError(self.get)

    @overload
    def get_boolean(self, section: SectionLike, name: str, default: bool) -> bool: ...

    @overload
    def get_boolean(self, section: SectionLike, name: str) -> Optional[bool]: ...

    def get_boolean(
        self, section: SectionLike, name: str, default: Optional[bool] = None
    ) -> Optional[bool]:
        """Retrieve a configuration setting as boolean.

        Args:
          section: Tuple with section name and optional subsection name
          name: Name of the setting
          default: Default value if setting is not found

        Returns:
          Contents of the setting
        """
        try:
            value = self.get(section, name)
        except KeyError:
            return default
        if value.lower() in _TRUE_VALUES:
            return True
        elif value.lower() in _FALSE_VALUES:
            return False
        raise ValueError(f"not a valid boolean string: {value!r}")

    def set(self, section: SectionLike, name: str, value: Union[str, bool]) -> None:
        """Set a configuration value."""
        raise NotImplementedError(self.set)

    def sections(self) -> Iterator[Section]:
        """Iterate over the sections.

        Returns: Iterator over section tuples
        """
        raise NotImplementedError(self.sections)

    def has_section(self, name: Section) -> bool:
        """Check if a specified section exists."""
        return name in self.sections()


def _section_key(section: SectionLike) -> Section:
    if not isinstance(section, tuple):
        section = (section,)
    # Section names are case insensitive, subsection names are not.
    return (section[0].lower(),) + tuple(section[1:])


class ConfigDict(Config):
    """Configuration stored in a dictionary."""

    def __init__(self) -> None:
        self._values: dict[Section, dict[str, str]] = {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._values!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, self.__class__) and other._values == self._values

    def get(self, section: SectionLike, name: str) -> str:
        key = _section_key(section)
        if len(key) > 1:
            try:
                return self._values[key][name.lower()]
            except KeyError:
                pass
        return self._values[key[:1]][name.lower()]

    def set(self, section: SectionLike, name: str, value: Union[str, bool]) -> None:
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._values.setdefault(_section_key(section), {})[name.lower()] = value

    def sections(self) -> Iterator[Section]:
        return iter(list(self._values))


_ESCAPE_TABLE = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
    "t": "\t",
    "b": "\b",
}
_COMMENT_CHARS = "#;"
_WHITESPACE_CHARS = " \t"


def _parse_string(value: str) -> str:
    ret = []
    whitespace = ""
    in_quotes = False
    value = value.strip()
    i = 0
    while i < len(value):
        c = value[i]
        if c == "\\":
            i += 1
            v = _ESCAPE_TABLE.get(value[i : i + 1], "\\")
            if v == "\\" and value[i : i + 1] != "\\":
                # Unknown escape, keep the backslash and reread the character
                i -= 1
            ret.append(whitespace + v)
            whitespace = ""
        elif c == '"':
            in_quotes = not in_quotes
        elif c in _COMMENT_CHARS and not in_quotes:
            break
        elif c in _WHITESPACE_CHARS and not in_quotes:
            whitespace += c
        else:
            ret.append(whitespace + c)
            whitespace = ""
        i += 1

    if in_quotes:
        raise ValueError("missing end quote")

    return "".join(ret)


def _check_variable_name(name: str) -> bool:
    return bool(name) and all(c.isalnum() or c == "-" for c in name)


def _check_section_name(name: str) -> bool:
    return bool(name) and all(c.isalnum() or c in "-." for c in name)


def _strip_comments(line: str) -> str:
    string_open = False
    for i, c in enumerate(line):
        if c == '"':
            string_open = not string_open
        elif not string_open and c in _COMMENT_CHARS:
            return line[:i]
    return line


def _parse_section_header_line(line: str) -> tuple[Section, str]:
    line = _strip_comments(line).rstrip()
    in_quotes = False
    for i, c in enumerate(line):
        if c == '"':
            in_quotes = not in_quotes
        elif c == "]" and not in_quotes:
            last = i
            break
    else:
        raise ValueError("expected trailing ]")
    pts = line[1:last].split(" ", 1)
    rest = line[last + 1 :]
    if not _check_section_name(pts[0]):
        raise ValueError(f"invalid section name {pts[0]!r}")
    if len(pts) == 2:
        sub = pts[1].strip()
        if not (len(sub) >= 2 and sub[0] == '"' and sub[-1] == '"'):
            raise ValueError(f"Invalid subsection {pts[1]!r}")
        return (pts[0], sub[1:-1]), rest
    if "." in pts[0]:
        name, sub = pts[0].split(".", 1)
        return (name, sub), rest
    return (pts[0],), rest


class ConfigFile(ConfigDict):
    """A git-style configuration file, like .git/config or ~/.gitconfig."""

    def __init__(self) -> None:
        super().__init__()
        self.path: Optional[str] = None

    @classmethod
    def from_file(cls, f: IO[str]) -> "ConfigFile":
        """Read configuration from a file-like object.

        Raises:
          ValueError: if the contents are not valid configuration
        """
        ret = cls()
        section: Optional[Section] = None
        for lineno, line in enumerate(f.readlines()):
            if lineno == 0 and line.startswith("\ufeff"):
                line = line[1:]
            line = line.lstrip()
            if line[:1] == "[":
                section, line = _parse_section_header_line(line)
                ret._values.setdefault(_section_key(section), {})
            if _strip_comments(line).strip() == "":
                continue
            if section is None:
                raise ValueError(f"setting {line!r} without section")
            try:
                setting, value = line.split("=", 1)
            except ValueError:
                setting = _strip_comments(line)
                value = "true"
            setting = setting.strip()
            if not _check_variable_name(setting):
                raise ValueError(f"invalid variable name {setting!r}")
            ret.set(section, setting, _parse_string(value))
        return ret

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike[str]]) -> "ConfigFile":
        """Read configuration from a file on disk."""
        with open(path, encoding="utf-8") as f:
            ret = cls.from_file(f)
            ret.path = os.fspath(path)
            return ret
