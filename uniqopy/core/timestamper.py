from datetime import datetime
from typing import Optional

from uniqopy.settings import TIMESTAMP_FORMAT


def timestamp(now: Optional[datetime] = None) -> str:
    """
    Date-and-time stamp using the system's local time.
    """
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
