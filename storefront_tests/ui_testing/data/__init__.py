"""
Login test data: models, YAML sets and the provider that serves them.
"""

from .login_provider import LoginDataNotFoundError, LoginDataProvider, login_provider
from .models import LoginCase, LoginCredentials, LoginOutcome

__all__ = [
    "LoginCase",
    "LoginCredentials",
    "LoginDataNotFoundError",
    "LoginDataProvider",
    "LoginOutcome",
    "login_provider",
]
