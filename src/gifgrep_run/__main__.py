"""Allow ``python -m gifgrep_run``."""

from __future__ import annotations

from .launcher import main

if __name__ == "__main__":
    raise SystemExit(main())
