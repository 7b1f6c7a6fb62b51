"""Local file helpers for per-installation game data.

Game data (the leaderboard) lives in a single per-user directory. Writes go
through a temp file in the same directory followed by a rename, so a crash
mid-write never leaves a truncated file behind for the next load.
"""

import contextlib
import os
import tempfile
from pathlib import Path

import structlog

logger = structlog.get_logger()

APP_DIR_NAME = ".memory_match"

# Owner read/write only; the data is personal but not secret.
_DATA_FILE_MODE = 0o600


def default_data_dir() -> Path:
    """Per-user data directory: %APPDATA% on Windows when set, else the home directory."""
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_DIR_NAME
    return Path.home() / APP_DIR_NAME


def atomic_write_text(path: Path | str, content: str) -> None:
    """Write text to ``path`` atomically, creating parent directories first.

    Raises OSError when the directory cannot be created or the file cannot
    be written; the previous file (if any) is left intact in that case.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}_", suffix=".tmp")
    fd_owned = True
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            fd_owned = False  # os.fdopen took ownership; it will close fd
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, _DATA_FILE_MODE)  # noqa: PTH101
        Path(tmp_path).replace(target)
    except BaseException:
        if fd_owned:
            with contextlib.suppress(OSError):
                os.close(fd)
        with contextlib.suppress(OSError):
            Path(tmp_path).unlink()
        raise
    logger.debug("wrote data file", path=str(target), size=len(content))
