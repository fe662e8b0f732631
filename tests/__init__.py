# Auto-generated __init__.py

from . import conftest
from .conftest import frozen_clock
from .conftest import isolated_cwd
from .conftest import reset_cli_logging
from . import test_cli
from . import test_copier
from . import test_hasher
from . import test_naming
from . import test_pipeline
from . import test_timestamper

__all__ = [
    "conftest",
    "test_cli",
    "test_copier",
    "test_hasher",
    "test_naming",
    "test_pipeline",
    "test_timestamper",
    "frozen_clock",
    "isolated_cwd",
    "reset_cli_logging",
]
