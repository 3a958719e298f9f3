"""Pytest fixtures for persistence integration tests.

Uses a private in-memory SQLite database per test.
"""

# Re-export shared fixtures from database.py
from tests.shared.fixtures.database import async_engine, db_session

# Make fixtures available to tests in this directory
__all__ = ["async_engine", "db_session"]
