import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'epiphany' and tests/ importable for helpers
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from epiphany.core.config import EpiphanyConfig, reset_config
from epiphany.core.schema import TypeRegistry
from epiphany.core.stdlib_logging import reset_stdlib_logging_for_tests
from epiphany.data import clear_caches


@pytest.fixture
def isolated_project_env(tmp_path, monkeypatch):
    """
    Isolated project environment for tests.

    Creates an empty type library under ``lib/epiphany`` and points project
    root resolution at it. Any ``EPIPHANY_*`` overrides from the developer
    environment are removed so config loads are deterministic.
    """
    for key in list(os.environ):
        if key.startswith("EPIPHANY_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("EPIPHANY_PROJECT_ROOT", str(tmp_path))
    monkeypatch.chdir(tmp_path)

    (tmp_path / "lib" / "epiphany" / "entity_types").mkdir(parents=True)
    (tmp_path / "lib" / "epiphany" / "intent_types").mkdir(parents=True)

    reset_config()
    clear_caches()
    yield tmp_path
    reset_config()
    reset_stdlib_logging_for_tests()


@pytest.fixture
def shared_config():
    """A fresh runtime config, independent of the process-wide one."""
    return EpiphanyConfig()


@pytest.fixture
def registry(isolated_project_env, shared_config):
    """TypeRegistry over the isolated project."""
    return TypeRegistry(isolated_project_env, config=shared_config)
