import sys
from io import StringIO
from typing import Optional

import atheris
from test_utils import is_expected_exception

with atheris.instrument_imports():
    from refnames.config import ConfigFile


def TestOneInput(data) -> Optional[int]:
    fdp = atheris.FuzzedDataProvider(data)
    text = fdp.ConsumeUnicodeNoSurrogates(len(data))
    try:
        cf = ConfigFile.from_file(StringIO(text))
        cf.get_boolean("core", "protectNTFS", False)
    except ValueError as e:
        expected_exceptions = [
            "without section",
            "invalid variable name",
            "expected trailing ]",
            "invalid section name",
            "Invalid subsection",
            "missing end quote",
            "not a valid boolean string",
        ]
        if is_expected_exception(expected_exceptions, e):
            return -1
        else:
            raise e
    return None


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
