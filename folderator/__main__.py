"""Allow running folderator as `python -m folderator`."""

from __future__ import annotations

from .cli import run

if __name__ == "__main__":
    run()
