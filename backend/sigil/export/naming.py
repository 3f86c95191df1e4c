"""Suggested download filenames."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def export_filename(name: str, ext: str) -> str:
    """"Ada Lovelace", "svg" -> "sigil-ada-lovelace.svg"."""
    slug = _WHITESPACE.sub("-", name.strip().lower()) or "untitled"
    return f"sigil-{slug}.{ext.lstrip('.')}"
