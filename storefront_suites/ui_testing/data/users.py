"""
User accounts loaded from users.yaml.

Environment variables UI_USERNAME and UI_PASSWORD take precedence so CI
can inject real credentials without editing the file.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

import yaml
from loguru import logger

from .models import Credentials


USERS_FILE = Path(__file__).parent / "users.yaml"


@lru_cache(maxsize=None)
def load_users(path: Path = USERS_FILE) -> Dict[str, Credentials]:
    """Read every account in the users file."""
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    users = {
        name: Credentials(username=str(entry["username"]), password=str(entry["password"]))
        for name, entry in raw.items()
    }
    logger.debug(f"Loaded {len(users)} user account(s) from {path}")
    return users


def valid_user() -> Credentials:
    """The account used by authenticated scenarios."""
    user = load_users()["valid_user"]
    return Credentials(
        username=os.getenv("UI_USERNAME", user.username),
        password=os.getenv("UI_PASSWORD", user.password),
    )
