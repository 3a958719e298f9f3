"""Root pytest configuration.

Test Structure:
    tests/
    ├── gatehouse/
    │   ├── unit/              # Mocked collaborators, no I/O
    │   └── integration/       # SQLite, the ASGI app and the CLI
    └── shared/                # Fixtures and factories used by both

Tests marked ``@pytest.mark.integration`` need a running PostgreSQL and
are skipped unless ``--run-integration`` or ``RUN_INTEGRATION=1`` is given.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from gatehouse_config import clear_settings_cache
from tests.shared.fixtures.settings import TEST_JWT_SECRET

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"

# Same env file as local development, when present
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")

os.environ.setdefault("JWT_SECRET_KEY", TEST_JWT_SECRET)


def _truthy(value: str | None) -> bool:
    return (value or "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: needs PostgreSQL (POSTGRES_* settings); skipped by default",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-integration") or _truthy(
        os.environ.get("RUN_INTEGRATION"),
    ):
        return

    skip_integration = pytest.mark.skip(
        reason="needs PostgreSQL; run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if item.get_closest_marker("integration") is not None:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Reload settings for every test so env changes never leak."""
    clear_settings_cache()
    yield
    clear_settings_cache()
