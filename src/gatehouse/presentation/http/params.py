"""Request parameter extraction.

Returns either the extracted values or the first error found, so that
routers branch on a result instead of catching exceptions.
"""

from collections.abc import Mapping
from typing import Any

from gatehouse.presentation.http.errors import (
    InvalidParamError,
    MissingParamError,
    ParamError,
)


def extract_params(
    body: Mapping[str, Any],
    *names: str,
) -> dict[str, str] | ParamError:
    """Read the named string parameters from ``body`` in order.

    A parameter that is absent, None or empty is missing; one that is
    present but not a string is invalid.
    """
    values: dict[str, str] = {}
    for name in names:
        value = body.get(name)
        if value is None or value == "":
            return MissingParamError(name)
        if not isinstance(value, str):
            return InvalidParamError(name)
        values[name] = value
    return values
