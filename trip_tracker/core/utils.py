"""
Utility functions for the application.
"""
from typing import Any


def strip_blank_fields(data: Any) -> Any:
    """Recursively drop dict keys whose value is an empty string.

    Only ``""`` is removed; ``None``, ``0``, ``False`` and empty containers
    are kept. Lists are walked but their items are never dropped. The input
    is not mutated.

        {"trip": {"city": "", "description": "Nice"}} -> {"trip": {"description": "Nice"}}
    """
    if isinstance(data, dict):
        return {
            key: strip_blank_fields(value)
            for key, value in data.items()
            if value != ""
        }
    if isinstance(data, list):
        return [strip_blank_fields(item) for item in data]
    return data
