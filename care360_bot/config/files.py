"""
Loaders for the local JSON files read once at startup.
"""

import json
from pathlib import Path
from typing import Any, List, Union

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import ConfigLoadError
from ..core.models.user import UserProfile

_USERS = TypeAdapter(List[UserProfile])


def _read_json(path: Union[str, Path]) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        raise ConfigLoadError(str(path), "file not found")
    except OSError as e:
        raise ConfigLoadError(str(path), f"cannot read file: {e}")
    except ValueError as e:
        raise ConfigLoadError(str(path), f"invalid JSON: {e}")


def load_tokens(path: Union[str, Path]) -> List[str]:
    """
    Load bot tokens.

    Accepts either a bare array ``["token", ...]`` or ``{"tokens": [...]}``.

    Raises:
        ConfigLoadError: file missing, malformed, or without any token
    """
    data = _read_json(path)

    if isinstance(data, dict):
        data = data.get("tokens")

    if not isinstance(data, list) or not all(isinstance(t, str) for t in data):
        raise ConfigLoadError(str(path), "expected a list of token strings")

    tokens = [t.strip() for t in data if t.strip()]
    if not tokens:
        raise ConfigLoadError(str(path), "no tokens configured")

    return tokens


def load_users(path: Union[str, Path]) -> List[UserProfile]:
    """
    Load the user list ``[{"id": ..., "name": ..., "phone": ...}]``.

    Raises:
        ConfigLoadError: file missing or malformed
    """
    data = _read_json(path)
    try:
        return _USERS.validate_python(data)
    except ValidationError as e:
        raise ConfigLoadError(str(path), f"unexpected user list shape: {e.error_count()} errors")
