from pathlib import Path
import hashlib
import logging

from uniqopy.core.errors import ReadError
from uniqopy.core.naming import display_name
from uniqopy.settings import CHUNK_SIZE

logger = logging.getLogger(__name__)


def md5_of_file(path: Path, chunk_size: int = CHUNK_SIZE) -> str:
    """
    Return the hex MD5 of a file's contents, read in fixed-size chunks.

    MD5 is not cryptographically secure. The digest is a (reasonably)
    unique signature for naming copies, nothing more.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    h = hashlib.md5(usedforsecurity=False)
    try:
        with open(path, "rb") as f:
            while True:
                chunk = f.read(chunk_size)
                if not chunk:
                    break
                h.update(chunk)
    except OSError as exc:
        logger.error("Failed to hash %s: %s", display_name(path), exc)
        raise ReadError(f"Error reading {display_name(path)}: {exc}") from exc

    digest = h.hexdigest()
    logger.debug("md5(%s) = %s", display_name(path), digest)
    return digest
