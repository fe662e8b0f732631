import logging
from datetime import datetime
import pytest


FIXED_NOW = datetime(2022, 2, 2, 22, 22, 22)
FIXED_TS = "2022-02-02-22:22:22"


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """
    Run every test from an empty working directory, since copies
    land in the cwd.
    """
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def frozen_clock(monkeypatch):
    """
    Pin the timestamp used by the pipeline.
    """
    import uniqopy.core.pipeline as pipeline

    monkeypatch.setattr(pipeline, "timestamp", lambda now=None: FIXED_TS)
    return FIXED_TS


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """
    Drop the stderr handler the CLI installs, so later tests don't log
    into a closed CliRunner stream.
    """
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
