from pathlib import Path
import logging
import os
from typing import Optional, Tuple

from uniqopy.core.errors import NamingError

logger = logging.getLogger(__name__)


def display_name(path) -> str:
    """
    Lossy text form of a path for messages. Bytes that aren't valid
    UTF-8 show up as U+FFFD instead of breaking the output stream.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def split_filename(path: Path) -> Tuple[str, Optional[str]]:
    """
    Split the final path component into (stem, extension).

    - `foo.jpg` -> ("foo", "jpg")
    - `foo.tar.gz` -> ("foo.tar", "gz")
    - `.bashrc` -> (".bashrc", None)
    - `foo.` -> ("foo", "")
    """
    name = Path(path).name
    if name in {"", ".", ".."}:
        raise NamingError(f"{display_name(path)}: no filename")

    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return name, None

    return stem, ext


def new_name(path: Path, ts: str, md5: str) -> str:
    """
    Construct a new filename, preserving the file extension.

    - `foo.jpg` becomes `foo.<timestamp>.<md5>.jpg`
    - `bar` becomes `bar.<timestamp>.<md5>`
    """
    path = Path(path)
    if not path.is_file():
        raise NamingError(f"{display_name(path)}: operand is not a file")

    stem, ext = split_filename(path)
    if ext is None:
        name = f"{stem}.{ts}.{md5}"
    else:
        name = f"{stem}.{ts}.{md5}.{ext}"

    logger.debug("New name for %s: %s", display_name(path), display_name(name))
    return name
