"""Locating and parsing ``roadctl.toml``.

Lookup order: an explicit ``--config`` path, then ``ROADCTL_CONFIG``, then
a walk up from the start directory (the way git finds ``.git/``).  The
first file found is the only one read; sections are not merged.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "roadctl.toml"
CONFIG_ENV_VAR = "ROADCTL_CONFIG"


def _walk_up(start: Path) -> Iterator[Path]:
    directory = start.resolve()
    for candidate_dir in (directory, *directory.parents):
        yield candidate_dir / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Return ``ROADCTL_CONFIG`` if set, else the nearest roadctl.toml above *start*."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None
    return next((p for p in _walk_up(start or Path.cwd()) if p.is_file()), None)


def resolve_config(explicit: str | Path | None, start: Path | None = None) -> Path | None:
    """Pick the config file in effect.

    An explicit path that does not exist means "no config file", not a
    fallback to discovery.
    """
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None
    return find_config(start)


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into raw section tables; ``{}`` when there is no file."""
    if path is None or not path.is_file():
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
