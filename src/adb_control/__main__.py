"""Module entrypoint for `python -m adb_control`."""

from __future__ import annotations

from adb_control.main import main

if __name__ == "__main__":
    raise SystemExit(main())
