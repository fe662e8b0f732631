# Auto-generated __init__.py

from . import copier
from .copier import copy_file
from . import errors
from .errors import CopyError
from .errors import ErrorKind
from .errors import NamingError
from .errors import ReadError
from .errors import UniqopyError
from .errors import UsageError
from . import hasher
from .hasher import md5_of_file
from . import models
from .models import CopyPlan
from .models import CopyResult
from . import naming
from .naming import display_name
from .naming import new_name
from .naming import split_filename
from . import pipeline
from .pipeline import execute_plan
from .pipeline import plan_copy
from .pipeline import run
from . import timestamper
from .timestamper import timestamp

__all__ = [
    "copier",
    "errors",
    "hasher",
    "models",
    "naming",
    "pipeline",
    "timestamper",
    "CopyError",
    "CopyPlan",
    "CopyResult",
    "ErrorKind",
    "NamingError",
    "ReadError",
    "UniqopyError",
    "UsageError",
    "copy_file",
    "display_name",
    "execute_plan",
    "md5_of_file",
    "new_name",
    "plan_copy",
    "run",
    "split_filename",
    "timestamp",
]
