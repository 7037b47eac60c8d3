#!/usr/bin/python3
# Suggest a branch name for an issue and check it against the local platform.
#
# Example usage:
#  python3 examples/branch_from_title.py 1234 "Crash when: opening *.lock files"

import argparse

from refnames import is_valid_ref_name, normalize_branch_name
from refnames.platform import get_platform_mode

parser = argparse.ArgumentParser()
parser.add_argument("issue", type=str)
parser.add_argument("title", type=str)
args = parser.parse_args()

name = normalize_branch_name(f"{args.issue} {args.title}")
ref = f"refs/heads/issue/{name}"
platform = get_platform_mode()

if not name or not is_valid_ref_name(ref, platform):
    print(f"Unable to derive a branch name from {args.title!r}")
else:
    print(f"{ref} ({platform.value})")
