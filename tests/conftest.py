import importlib
import json
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env if present (no-op when missing).
load_dotenv()

import ccsuffix.config as cfg  # noqa: E402

# ---- env isolation ----------------------------------------------------------


@pytest.fixture(autouse=True)
def _no_overrides_env(monkeypatch):
    """
    Run every test with CCSUFFIX_OVERRIDES blanked (set, not deleted, so a
    local .env cannot refill it on reload). Config constants are
    re-evaluated on the way in and restored on the way out.
    """
    monkeypatch.setenv("CCSUFFIX_OVERRIDES", "")
    importlib.reload(cfg)
    yield
    monkeypatch.undo()
    importlib.reload(cfg)


# ---- override files ---------------------------------------------------------


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def overrides_file(tmp_path):
    """A valid override file: fixes NZ and adds JP (lowercase key on purpose)."""
    return _write_json(
        tmp_path / "overrides.json", {"NZ": ".co.nz", "jp": ".co.jp"}
    )


@pytest.fixture
def bad_overrides_file(tmp_path):
    return _write_json(
        tmp_path / "bad.json", {"JPN": ".co.jp", "KR": "co.kr"}
    )


@pytest.fixture
def non_object_overrides_file(tmp_path):
    return _write_json(tmp_path / "list.json", [["NZ", ".co.nz"]])


@pytest.fixture
def undecodable_overrides_file(tmp_path):
    p = tmp_path / "latin1.json"
    p.write_bytes(b'{"NZ": ".co.nz\xff"}')
    return p
