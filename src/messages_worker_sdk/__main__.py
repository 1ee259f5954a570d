"""Permite ejecutar la CLI con `python -m messages_worker_sdk`."""

from __future__ import annotations

from messages_worker_sdk.cli.main import run

if __name__ == "__main__":
    run()
