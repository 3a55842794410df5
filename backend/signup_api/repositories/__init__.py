"""Repository package exposing persistence-layer access for domain models."""

from __future__ import annotations

from signup_api.repositories.base import BaseRepository
from signup_api.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
]
