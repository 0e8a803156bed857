"""Wrappers for text file I/O with consistent encoding (UTF-8)."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

PathLike = Path | str

# Mode for a file created from scratch, before the process umask applies.
_NEW_FILE_MODE = 0o666


def read_text(path: PathLike) -> str:
    """Read path as UTF-8 text. Raises FileNotFoundError when it is missing."""
    p = path if isinstance(path, Path) else Path(path)
    return p.read_text(encoding="utf-8")


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_text_atomic(path: PathLike, text: str) -> None:
    """Write text to path as UTF-8, replacing any existing file in one step.

    The content goes to a temporary file next to the real target first, then
    ``os.replace`` swaps it in, so readers never see a half-written file.
    A symlinked path is followed and the link itself is left in place. The
    replaced file keeps its permission bits; a new file gets the usual
    umask-derived mode.
    """
    p = path if isinstance(path, Path) else Path(path)
    target = p.resolve() if p.is_symlink() else p
    try:
        mode = stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        mode = _NEW_FILE_MODE & ~_current_umask()

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
