from __future__ import annotations
import sys
from pyreader.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pyreader.main` and the `pyreader` script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
