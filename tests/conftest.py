"""Pytest configuration and shared fixtures for less-compiler tests."""

import logging
import sys
from pathlib import Path

import pytest
import yaml

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from less_compiler import CompilerConfig, LessCompiler
from less_compiler.io.logging import LOGGER_NAME
from tests.fixtures import FakeService


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging after each test so handlers never outlive their streams."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def fake_service() -> FakeService:
    """Fake service that echoes source content as CSS."""
    return FakeService()


@pytest.fixture
def compiler(fake_service) -> LessCompiler:
    """Compiler backed by the fake service."""
    return LessCompiler(service=fake_service, config=CompilerConfig())


# ============================================================================
# Source File Fixtures
# ============================================================================


@pytest.fixture
def write_less(tmp_path: Path):
    """Return a helper that writes a source file under tmp_path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_compiler_config(tmp_path) -> Path:
    """Create sample compiler configuration file."""
    config = {
        "less_compiler": {
            "version_header": False,
            "detect_redirect_cycles": True,
            "log_level": "INFO",
        },
    }

    path = tmp_path / "compiler.yaml"
    with open(path, "w") as f:
        yaml.dump(config, f)

    return path
