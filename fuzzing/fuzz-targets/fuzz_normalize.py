import sys
from typing import Optional

import atheris

with atheris.instrument_imports():
    from test_utils import EnhancedFuzzedDataProvider

    from refnames.normalize import normalize_branch_name


def TestOneInput(data) -> Optional[int]:
    fdp = EnhancedFuzzedDataProvider(data)
    text = fdp.ConsumeRandomString()
    once = normalize_branch_name(text)
    twice = normalize_branch_name(once)
    if once != twice:
        raise AssertionError(f"{text!r}: {once!r} normalized again to {twice!r}")
    if once and (once[0] in "-_." or "." in once):
        raise AssertionError(f"{text!r}: unexpected separator in {once!r}")
    return None


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
