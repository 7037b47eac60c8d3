# test_cli.py -- tests for cli.py
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

"""Tests for refnames.cli."""

import io
import logging
import os
import shutil
import tempfile
from unittest.mock import patch

from refnames import cli, log_utils

from . import TestCase


class RefnamesCliTestCase(TestCase):
    """Base class for CLI tests."""

    def setUp(self) -> None:
        super().setUp()
        self.test_dir = tempfile.mkdtemp()
        self.addCleanup(shutil.rmtree, self.test_dir)
        root_logger = logging.getLogger()
        self.addCleanup(setattr, root_logger, "handlers", list(root_logger.handlers))
        self.addCleanup(root_logger.setLevel, root_logger.level)
        self.addCleanup(
            setattr,
            log_utils._REFNAMES_LOGGER,
            "handlers",
            list(log_utils._REFNAMES_LOGGER.handlers),
        )

    def _run_cli(self, *args, stdin: str = ""):
        """Run CLI command and capture its output."""
        stdout = io.StringIO()
        with (
            patch("sys.stdout", stdout),
            patch("sys.stdin", io.StringIO(stdin)),
        ):
            result = cli.main(list(args))
        return result, stdout.getvalue()

    def _write_config(self, text: str) -> str:
        path = os.path.join(self.test_dir, "config")
        with open(path, "w") as f:
            f.write(text)
        return path


class MainTest(RefnamesCliTestCase):
    def test_no_arguments(self) -> None:
        result, stdout = self._run_cli()
        self.assertEqual(1, result)
        self.assertIn("usage: refnames", stdout)

    def test_unknown_command(self) -> None:
        result, _stdout = self._run_cli("frobnicate")
        self.assertEqual(1, result)

    def test_help(self) -> None:
        with self.assertLogs("refnames.cli", level="INFO") as cm:
            self._run_cli("help")
        output = "\n".join(cm.output)
        self.assertIn("check-ref-format", output)
        self.assertIn("normalize-branch-name", output)


class CheckRefFormatCommandTest(RefnamesCliTestCase):
    def test_valid(self) -> None:
        result, stdout = self._run_cli("check-ref-format", "refs/heads/master")
        self.assertEqual(0, result)
        self.assertEqual("", stdout)

    def test_invalid(self) -> None:
        with self.assertLogs("refnames.cli", level="ERROR") as cm:
            result, _stdout = self._run_cli(
                "check-ref-format", "refs/heads/master", "refs/heads/a..b"
            )
        self.assertEqual(1, result)
        self.assertEqual(
            [
                "ERROR:refnames.cli:refs/heads/a..b: "
                "component 'a..b' contains '..'"
            ],
            cm.output,
        )

    def test_branch(self) -> None:
        result, _stdout = self._run_cli("check-ref-format", "--branch", "master")
        self.assertEqual(0, result)
        with self.assertLogs("refnames.cli", level="ERROR"):
            result, _stdout = self._run_cli("check-ref-format", "--branch", ".x")
        self.assertEqual(1, result)

    def test_platform(self) -> None:
        result, _stdout = self._run_cli(
            "check-ref-format", "--platform", "unix", "refs/heads/con"
        )
        self.assertEqual(0, result)
        with self.assertLogs("refnames.cli", level="ERROR"):
            result, _stdout = self._run_cli(
                "check-ref-format", "--platform", "windows", "refs/heads/con"
            )
        self.assertEqual(1, result)

    def test_auto_platform_from_config(self) -> None:
        path = self._write_config("[core]\n\tprotectNTFS = true\n")
        with self.assertLogs("refnames.cli", level="ERROR"):
            result, _stdout = self._run_cli(
                "check-ref-format", "--config", path, "refs/heads/aux"
            )
        self.assertEqual(1, result)

    def test_auto_platform_from_host(self) -> None:
        path = self._write_config("[core]\n")
        with patch("refnames.platform.os.name", "posix"):
            result, _stdout = self._run_cli(
                "check-ref-format", "--config", path, "refs/heads/aux"
            )
        self.assertEqual(0, result)

    def test_missing_config(self) -> None:
        with self.assertLogs("refnames.cli", level="ERROR") as cm:
            result, _stdout = self._run_cli(
                "check-ref-format",
                "--config",
                os.path.join(self.test_dir, "nonexistent"),
                "refs/heads/master",
            )
        self.assertEqual(1, result)
        self.assertIn("Unable to read configuration", cm.output[0])

    def test_invalid_config(self) -> None:
        path = self._write_config("[core]\n\tprotectNTFS = maybe\n")
        with self.assertLogs("refnames.cli", level="ERROR"):
            result, _stdout = self._run_cli(
                "check-ref-format", "--config", path, "refs/heads/master"
            )
        self.assertEqual(1, result)


class NormalizeBranchNameCommandTest(RefnamesCliTestCase):
    def test_arguments(self) -> None:
        result, stdout = self._run_cli(
            "normalize-branch-name", "Bug 12345 :::: Hello World", "fix: typo"
        )
        self.assertEqual(0, result)
        self.assertEqual("Bug_12345-Hello_World\nfix-_typo\n", stdout)

    def test_full(self) -> None:
        result, stdout = self._run_cli(
            "normalize-branch-name", "--full", "Bug 12345 - Hello World!"
        )
        self.assertEqual(0, result)
        self.assertEqual("refs/heads/Bug_12345-Hello_World\n", stdout)

    def test_stdin(self) -> None:
        result, stdout = self._run_cli(
            "normalize-branch-name", stdin="add feature\n  fix  bug  \n"
        )
        self.assertEqual(0, result)
        self.assertEqual("add_feature\nfixbug\n", stdout)

    def test_nothing_usable(self) -> None:
        with self.assertLogs("refnames.cli", level="ERROR"):
            result, stdout = self._run_cli("normalize-branch-name", "?!", "ok")
        self.assertEqual(1, result)
        self.assertEqual("ok\n", stdout)
