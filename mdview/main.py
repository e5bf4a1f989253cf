from __future__ import annotations
import sys
from mdview.app import run_app


def main() -> int:
    """Module entrypoint for `python -m mdview.main` and the `mdview` console script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
