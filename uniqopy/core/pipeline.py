from datetime import datetime
from pathlib import Path
import logging
from typing import Optional

from uniqopy.core.copier import copy_file
from uniqopy.core.hasher import md5_of_file
from uniqopy.core.models import CopyPlan, CopyResult
from uniqopy.core.naming import display_name, new_name
from uniqopy.core.timestamper import timestamp

logger = logging.getLogger(__name__)


def plan_copy(
    source: Path,
    dest_dir: Optional[Path] = None,
    now: Optional[datetime] = None,
) -> CopyPlan:
    """
    Hash, stamp and name the copy. Nothing is written.

    Order matters: a source that can't be read fails as a read error
    before naming gets a chance to reject it.
    """
    source = Path(source)
    md5 = md5_of_file(source)
    ts = timestamp(now)
    name = new_name(source, ts, md5)

    return CopyPlan(
        source=source,
        fingerprint=md5,
        timestamp=ts,
        destination_name=name,
        dest_dir=Path(dest_dir) if dest_dir is not None else Path.cwd(),
    )


def execute_plan(plan: CopyPlan) -> CopyResult:
    # The source is read again here; changes since hashing are not detected
    bytes_copied = copy_file(plan.source, plan.destination)
    return CopyResult(
        source=plan.source,
        destination=plan.destination,
        bytes_copied=bytes_copied,
    )


def run(
    source: Path,
    dest_dir: Optional[Path] = None,
    now: Optional[datetime] = None,
) -> CopyResult:
    plan = plan_copy(source, dest_dir=dest_dir, now=now)
    logger.info(
        "Copying %s to %s",
        display_name(plan.source), display_name(plan.destination),
    )
    return execute_plan(plan)
