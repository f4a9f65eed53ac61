"""Users of the API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A user."""

    id: int = 0
    email: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> User:
        return cls(id=data.get("id") or 0, email=data.get("email") or "")