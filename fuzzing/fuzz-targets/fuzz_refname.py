import sys
from typing import Optional

import atheris

with atheris.instrument_imports():
    from test_utils import EnhancedFuzzedDataProvider

    from refnames.errors import RefFormatError
    from refnames.normalize import normalize_branch_name
    from refnames.platform import PlatformMode
    from refnames.refs import check_ref_name, is_valid_ref_name, ref_name_error


def TestOneInput(data) -> Optional[int]:
    fdp = EnhancedFuzzedDataProvider(data)
    platform = fdp.PickValueInList(list(PlatformMode))
    name = fdp.ConsumeRandomString()

    valid = is_valid_ref_name(name, platform)
    if valid != (ref_name_error(name, platform) is None):
        raise AssertionError(f"is_valid_ref_name disagrees for {name!r}")
    try:
        check_ref_name(name, platform)
    except RefFormatError:
        if valid:
            raise
    else:
        if not valid:
            raise AssertionError(f"check_ref_name accepted {name!r}")

    # Windows rules only add restrictions.
    if is_valid_ref_name(name, PlatformMode.WINDOWS) and not is_valid_ref_name(
        name, PlatformMode.UNIX
    ):
        raise AssertionError(f"{name!r} is only valid on Windows")

    normalized = normalize_branch_name(name)
    if normalized:
        for mode in PlatformMode:
            if not is_valid_ref_name("refs/heads/" + normalized, mode):
                raise AssertionError(f"{name!r} normalized to invalid {normalized!r}")
    return None


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
