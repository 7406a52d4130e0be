"""Entry point for ``python -m rkeys``."""

from rkeys.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
