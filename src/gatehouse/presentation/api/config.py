"""API configuration adapter.

Bridges the centralized gatehouse_config settings with the API layer.
"""

from fastapi import Request

from gatehouse_config.settings import Settings


def get_api_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings
