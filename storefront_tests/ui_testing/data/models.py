"""
Login test data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class LoginCredentials:
    """Username/password pair typed into the login form."""
    username: str
    password: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoginCredentials":
        return cls(
            username=str(data.get("username") or ""),
            password=str(data.get("password") or ""),
        )


class LoginOutcome(str, Enum):
    """Expected result of a login attempt."""
    SUCCESS = "success"
    LOCKED = "locked"
    INVALID = "invalid"
    MISSING_USERNAME = "missing-username"
    MISSING_PASSWORD = "missing-password"


@dataclass(frozen=True)
class LoginCase:
    """
    One data-driven login scenario.

    Attributes:
        id: Unique identifier (e.g. "ok-standard", "locked-out")
        creds: Credentials to submit
        outcome: Expected outcome
        description: Short human description
        expected_error: Error banner text when the outcome is not success
        tags: Free-form grouping tags
    """
    id: str
    creds: LoginCredentials
    outcome: LoginOutcome
    description: Optional[str] = None
    expected_error: Optional[str] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoginCase":
        return cls(
            id=str(data["id"]),
            creds=LoginCredentials.from_dict(data.get("creds") or {}),
            outcome=LoginOutcome(data["outcome"]),
            description=data.get("description"),
            expected_error=data.get("expected_error"),
            tags=tuple(data.get("tags") or ()),
        )

    @property
    def is_success(self) -> bool:
        return self.outcome is LoginOutcome.SUCCESS
