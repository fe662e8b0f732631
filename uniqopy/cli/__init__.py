# Auto-generated __init__.py

from . import uniqopy
from .uniqopy import app
from .uniqopy import configure_logging
from .uniqopy import main

__all__ = [
    "uniqopy",
    "app",
    "configure_logging",
    "main",
]
