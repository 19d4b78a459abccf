# ===== SECTION: IMPORTS =====
import logging
import os
import tempfile
from pathlib import Path


# ===== SECTION: FILE WRITING =====

def write_atomic(path: Path, content: str) -> None:
    """
    Writes content to path in one step.

    The content goes to a temporary file in the target directory, which then
    replaces the target. A failure at any point leaves the target untouched
    and removes the temporary file.

    Raises:
        OSError: If the directory cannot be created or the file cannot be written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as tmp:
            tmp.write(content)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    logging.debug(f"Wrote {len(content)} characters to {path}")
