#
# refnames - Command-line interface to refnames
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

"""Command-line interface to refnames.

Provides ``check-ref-format``, which validates ref names, and
``normalize-branch-name``, which turns free-form text into branch names.
"""

__all__ = [
    "Command",
    "cmd_check_ref_format",
    "cmd_help",
    "cmd_normalize_branch_name",
    "commands",
    "main",
]

import argparse
import logging
import signal
import sys
import types
from collections.abc import Sequence
from typing import Optional

from . import log_utils
from .config import ConfigFile
from .normalize import normalize_branch_name
from .platform import PlatformMode, get_platform_mode
from .refs import ref_name_error

logger = logging.getLogger(__name__)

BRANCH_PREFIX = "refs/heads/"


def signal_int(signal: int, frame: Optional[types.FrameType]) -> None:
    """Handle interrupt signal by exiting.

    Args:
        signal: Signal number
        frame: Current stack frame
    """
    sys.exit(1)


def _add_platform_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--platform",
        choices=["auto", "unix", "windows"],
        default="auto",
        help="Filesystem rules to apply (default: detect from config and host)",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Configuration file to read core.protectNTFS from",
    )


def _resolve_platform(parsed_args: argparse.Namespace) -> PlatformMode:
    if parsed_args.platform != "auto":
        return PlatformMode.from_string(parsed_args.platform)
    config = None
    if parsed_args.config:
        config = ConfigFile.from_path(parsed_args.config)
    return get_platform_mode(config)


class Command:
    """A refnames subcommand."""

    def run(self, args: Sequence[str]) -> Optional[int]:
        """Run the command."""
        raise NotImplementedError(self.run)


class cmd_check_ref_format(Command):
    """Ensure that a reference name is well formed."""

    def run(self, args: Sequence[str]) -> int:
        """Execute the check-ref-format command.

        Args:
            args: Command line arguments
        """
        parser = argparse.ArgumentParser(prog="refnames check-ref-format")
        parser.add_argument(
            "--branch",
            action="store_true",
            help="Check the names as branch names, i.e. as refs/heads/NAME",
        )
        _add_platform_arguments(parser)
        parser.add_argument("names", nargs="+", help="Ref names to check")
        parsed_args = parser.parse_args(args)
        try:
            platform = _resolve_platform(parsed_args)
        except (OSError, ValueError) as e:
            logger.error("Unable to read configuration: %s", e)
            return 1
        ret = 0
        for name in parsed_args.names:
            if parsed_args.branch:
                name = BRANCH_PREFIX + name
            error = ref_name_error(name, platform)
            if error is not None:
                logger.error("%s: %s", name, error)
                ret = 1
        return ret


class cmd_normalize_branch_name(Command):
    """Turn free-form text into a branch name."""

    def run(self, args: Sequence[str]) -> int:
        """Execute the normalize-branch-name command.

        Args:
            args: Command line arguments
        """
        parser = argparse.ArgumentParser(prog="refnames normalize-branch-name")
        parser.add_argument(
            "--full",
            action="store_true",
            help="Print the full ref name, refs/heads/NAME",
        )
        parser.add_argument(
            "text",
            nargs="*",
            help="Text to normalize. If not specified, reads lines from stdin.",
        )
        parsed_args = parser.parse_args(args)
        if parsed_args.text:
            texts = parsed_args.text
        else:
            texts = sys.stdin.read().splitlines()
        ret = 0
        for text in texts:
            name = normalize_branch_name(text)
            if not name:
                logger.error("Nothing usable left of %r", text)
                ret = 1
                continue
            if parsed_args.full:
                name = BRANCH_PREFIX + name
            sys.stdout.write(name + "\n")
        return ret


class cmd_help(Command):
    """Display help information about refnames."""

    def run(self, args: Sequence[str]) -> None:
        """Execute the help command.

        Args:
            args: Command line arguments
        """
        parser = argparse.ArgumentParser(prog="refnames help")
        parser.parse_args(args)
        logger.info("Available commands:")
        for cmd in sorted(commands):
            logger.info("  %s", cmd)


commands = {
    "check-ref-format": cmd_check_ref_format,
    "help": cmd_help,
    "normalize-branch-name": cmd_normalize_branch_name,
}


def main(argv: Optional[Sequence[str]] = None) -> Optional[int]:
    """Main entry point for the refnames CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code or None
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="refnames",
        description="Check and normalize git ref names",
    )
    parser.add_argument(
        "command",
        help=f"Command to run. Available: {', '.join(sorted(commands))}",
    )
    parser.add_argument("args", nargs=argparse.REMAINDER)
    if not argv:
        parser.print_help()
        return 1
    parsed_args = parser.parse_args(argv[:1])

    log_utils.default_logging_config()

    try:
        cmd_kls = commands[parsed_args.command]
    except KeyError:
        logging.fatal("No such subcommand: %s", parsed_args.command)
        return 1
    return cmd_kls().run(argv[1:])


def _main() -> None:
    signal.signal(signal.SIGINT, signal_int)

    sys.exit(main())


if __name__ == "__main__":
    _main()
