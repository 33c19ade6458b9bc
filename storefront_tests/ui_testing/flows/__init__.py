"""Business flows composed from page objects."""

from .auth_flow import assert_login_error, assert_login_success, login_do

__all__ = [
    "assert_login_error",
    "assert_login_success",
    "login_do",
]
