"""
Song Library Storage

Read-only access to the directory tree of songs served under ``/Songs``:
- Path traversal prevention
- Directory listings in the anchor format the player parses
- Media type lookup for served files
"""

import html
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List
from urllib.parse import quote

from .config import Settings


MEDIA_TYPES: dict[str, str] = {
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".flac": "audio/flac",
    ".aac": "audio/aac",
    ".m4a": "audio/mp4",
    ".ogg": "audio/ogg",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".json": "application/json",
}


@dataclass(frozen=True)
class LibraryEntry:
    """One child of a library directory."""

    name: str


def get_library_root(settings: Settings) -> Path:
    """Resolved song library root from configuration."""
    return Path(settings.songs_path).resolve()


def resolve_safe_path(root: Path, relative: str) -> Path:
    """
    Resolve a request path against the library root.

    Args:
        root: Resolved library root
        relative: Path below the root as it appeared in the URL

    Returns:
        Path: Absolute path inside the root (the root itself for "")

    Raises:
        ValueError: If the path contains null bytes, names a dotfile or
            dot-directory, or escapes the root

    Example:
        >>> resolve_safe_path(Path("/srv/Songs"), "f2/song.mp3")
        PosixPath('/srv/Songs/f2/song.mp3')
        >>> resolve_safe_path(Path("/srv/Songs"), "../etc/passwd")
        Traceback (most recent call last):
        ValueError: Hidden or relative path segment: ../etc/passwd
    """
    if "\x00" in relative:
        raise ValueError("Invalid path")

    if any(part.startswith(".") for part in relative.split("/")):
        raise ValueError(f"Hidden or relative path segment: {relative}")

    resolved_root = root.resolve()
    resolved_path = (resolved_root / relative.lstrip("/")).resolve()

    if resolved_path != resolved_root and not str(resolved_path).startswith(
        str(resolved_root) + os.sep
    ):
        raise ValueError("Path traversal detected: path escapes library root")

    return resolved_path


def list_directory(path: Path) -> List[LibraryEntry]:
    """List a directory's children sorted by name, hidden files skipped."""
    entries = [
        LibraryEntry(name=child.name)
        for child in path.iterdir()
        if not child.name.startswith(".")
    ]
    return sorted(entries, key=lambda e: e.name)


def render_listing(url_path: str, entries: List[LibraryEntry]) -> str:
    """
    Render a directory listing as ``<a href=...>name</a>`` lines joined by
    ``<br>``, the format the browser player scrapes for folders and tracks.
    """
    base = "/" + url_path.strip("/")
    links = []
    for entry in entries:
        href = quote(f"{base}/{entry.name}")
        links.append(f'<a href="{html.escape(href)}">{html.escape(entry.name)}</a>')
    return "<br>".join(links)


def get_media_type(filename: str) -> str:
    """Media type for a served file; unknown extensions are octet-stream."""
    ext = os.path.splitext(filename)[1].lower()
    return MEDIA_TYPES.get(ext, "application/octet-stream")

