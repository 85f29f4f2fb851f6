"""Entry point for i3-split-indicator when run as a module."""

from .daemon import main

if __name__ == "__main__":
    raise SystemExit(main())
