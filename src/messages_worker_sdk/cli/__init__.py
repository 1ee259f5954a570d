"""CLI `messages-worker` (Typer + Rich)."""
