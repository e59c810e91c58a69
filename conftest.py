from __future__ import annotations

import os
import shutil
import sys
import types
import uuid
from pathlib import Path

import pytest


_TEST_ROOT = Path(__file__).resolve().parent / ".tmp_test_env"
_APPDATA = _TEST_ROOT / "AppData" / "Roaming"
_HOME = _TEST_ROOT / "home"
_TMP_CASES = _TEST_ROOT / "pytest_cases"

for _path in (_APPDATA, _HOME, _HOME / ".config", _TMP_CASES):
    _path.mkdir(parents=True, exist_ok=True)

os.environ["APPDATA"] = str(_APPDATA)
os.environ["HOME"] = str(_HOME)
os.environ["USERPROFILE"] = str(_HOME)
os.environ.pop("CHARINFO_DICTIONARY", None)


class _NoopLogger:
    def __getattr__(self, _name):
        def _noop(*_args, **_kwargs):
            return None

        return _noop

    def opt(self, *_args, **_kwargs):
        return self

    def log(self, *_args, **_kwargs):
        return None


_noop_logger = _NoopLogger()
_fake_logging_module = types.ModuleType("CharacterInformation.util.logging_config")
_fake_logging_module.logger = _noop_logger
_fake_logging_module.get_logger = lambda *args, **kwargs: _noop_logger
_fake_logging_module.set_level = lambda *args, **kwargs: None
_fake_logging_module.cleanup_old_logs = lambda *args, **kwargs: None
_fake_logging_module.LoggerManager = object

sys.modules["CharacterInformation.util.logging_config"] = _fake_logging_module


@pytest.fixture
def tmp_path():
    case_path = _TMP_CASES / f"case_{uuid.uuid4().hex}"
    case_path.mkdir(parents=True, exist_ok=False)
    try:
        yield case_path
    finally:
        shutil.rmtree(case_path, ignore_errors=True)
