"""Root conftest — shared test configuration and dataset fixtures."""

import json
import os
import shutil
from pathlib import Path

import pytest

# Human-readable logs in test output
os.environ.setdefault("EXHIBITS_API_LOG_FORMAT", "text")

SAMPLE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """An empty working directory so relative lookups find nothing by accident."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def data_dir(tmp_path):
    """A fresh copy of the sample datasets."""
    target = tmp_path / "data"
    target.mkdir()
    for name in ("exhibits.json", "qm_data.json"):
        shutil.copy(SAMPLE_DATA_DIR / name, target / name)
    return target


@pytest.fixture
def raw_exhibits():
    return json.loads((SAMPLE_DATA_DIR / "exhibits.json").read_text(encoding="utf-8"))


@pytest.fixture
def raw_artefacts():
    return json.loads((SAMPLE_DATA_DIR / "qm_data.json").read_text(encoding="utf-8"))
