from importlib.metadata import PackageNotFoundError, version
from typing import Sequence
from functools import cache


DISTRIBUTION_NAME = 'focus-window'


@cache
def get_version() -> str:
    if __package__ is None:
        return "development"
    try:
        return str(version(DISTRIBUTION_NAME))
    except PackageNotFoundError:
        return "development"


def main(argv: Sequence[str]) -> int:
    print(get_version())
    return 0


if __name__ == "__main__":
    import sys
    sys.exit(main(sys.argv[1:]))
