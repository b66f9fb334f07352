"""Module entrypoint for `python -m napi_matrix`."""

from __future__ import annotations

from napi_matrix.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
