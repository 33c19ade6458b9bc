"""
================================================================================
Login Data Provider
================================================================================

Loads login credentials (by alias) and data-driven login cases from the YAML
sets next to this module.

    sets/login_credentials.yaml   alias -> {username, password}
    sets/login_cases.yaml         list of LoginCase records

Usage:
    creds = login_provider.get_creds("standard")
    case = login_provider.get_case("locked-out")
    negatives = login_provider.list_cases(tags_include=["negative"])

================================================================================
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import yaml
from loguru import logger

from .models import LoginCase, LoginCredentials, LoginOutcome


SETS_DIR = Path(__file__).parent / "sets"
CREDENTIALS_FILE = "login_credentials.yaml"
CASES_FILE = "login_cases.yaml"


class LoginDataNotFoundError(KeyError):
    """Raised when a credential alias or case id does not exist."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else super().__str__()


class LoginDataProvider:
    """
    Read-only access to the login data sets.

    Files are read on first use and cached for the life of the provider.
    Lists handed out are copies; the records themselves are frozen.
    """

    def __init__(self, sets_dir: Union[str, Path, None] = None):
        """
        Args:
            sets_dir: Directory holding the YAML sets (defaults to ./sets)
        """
        self.sets_dir = Path(sets_dir) if sets_dir else SETS_DIR
        self._credentials: Optional[Dict[str, LoginCredentials]] = None
        self._cases: Optional[List[LoginCase]] = None

    def _load_yaml(self, filename: str) -> Any:
        path = self.sets_dir / filename
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        logger.debug(f"Loaded login data set: {path}")
        return data

    @property
    def credentials(self) -> Dict[str, LoginCredentials]:
        if self._credentials is None:
            raw = self._load_yaml(CREDENTIALS_FILE) or {}
            self._credentials = {
                str(alias): LoginCredentials.from_dict(entry) for alias, entry in raw.items()
            }
        return self._credentials

    @property
    def cases(self) -> List[LoginCase]:
        if self._cases is None:
            raw = self._load_yaml(CASES_FILE) or []
            self._cases = [LoginCase.from_dict(entry) for entry in raw]
        return self._cases

    def get_creds(self, alias: str) -> LoginCredentials:
        """Credentials by alias (e.g. 'standard', 'locked')."""
        creds = self.credentials.get(str(alias))
        if creds is None:
            raise LoginDataNotFoundError(f"[login_provider] alias not found: {alias}")
        return creds

    def get_case(self, case_id: str) -> LoginCase:
        """Case by id."""
        for case in self.cases:
            if case.id == case_id:
                return case
        raise LoginDataNotFoundError(f"[login_provider] case not found: {case_id}")

    def list_cases(
        self,
        outcome: Union[LoginOutcome, str, None] = None,
        tags_include: Optional[Iterable[str]] = None,
    ) -> List[LoginCase]:
        """
        Filter cases.

        Args:
            outcome: Keep only cases with this outcome
            tags_include: Keep cases carrying at least one of these tags

        Returns:
            New list of matching cases, in file order
        """
        items = list(self.cases)
        if outcome is not None:
            wanted = LoginOutcome(outcome)
            items = [c for c in items if c.outcome is wanted]
        tags = set(tags_include or ())
        if tags:
            items = [c for c in items if tags.intersection(c.tags)]
        return items

    def all_cases(self) -> List[LoginCase]:
        """Every case (copy), handy for parametrisation."""
        return list(self.cases)


login_provider = LoginDataProvider()


__all__ = [
    "LoginDataNotFoundError",
    "LoginDataProvider",
    "login_provider",
]
