from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional

import click

from .exceptions import OutputError

logger = logging.getLogger(__name__)


def write_output(text: str, destination: Optional[str] = None, stream: Optional[IO[str]] = None) -> None:
    """Write the Markdown to ``destination``, or to stdout when no path is given."""
    if not destination:
        click.echo(text, file=stream, nl=False)
        return

    path = Path(destination)
    try:
        if path.parent != Path("."):
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Could not write {destination}: {e}") from e
    logger.info("✓ Markdown saved to %s", destination)
