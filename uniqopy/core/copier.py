from pathlib import Path
import logging
import shutil

from uniqopy.core.errors import CopyError
from uniqopy.core.naming import display_name

logger = logging.getLogger(__name__)


def copy_file(source: Path, destination: Path) -> int:
    """
    Copy source to destination and return the number of bytes written.

    The destination is created or truncated, then written; an existing
    file is overwritten, an existing directory is an error. A partial
    destination left behind by a failed copy is not cleaned up.
    """
    try:
        shutil.copyfile(str(source), str(destination))
        shutil.copymode(str(source), str(destination))
        size = Path(destination).stat().st_size
    except OSError as exc:
        logger.error(
            "Failed to copy %s -> %s: %s",
            display_name(source), display_name(destination), exc,
        )
        raise CopyError(str(exc)) from exc

    logger.debug(
        "Copied %s -> %s (%d bytes)",
        display_name(source), display_name(destination), size,
    )
    return size
