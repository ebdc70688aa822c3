"""Auth Checks — pure checks over AuthContext and the admin password.

Invariants:
    - check_login() raises NotAuthenticatedError only when the gate is enforced
    - password_matches() compares in constant time
"""

import hmac

from blog.core.domain_types import AuthContext
from blog.core.errors import NotAuthenticatedError


def check_login(auth: AuthContext) -> None:
    if auth.enforced and not auth.logged_in:
        raise NotAuthenticatedError()


def password_matches(supplied: str, expected: str) -> bool:
    return hmac.compare_digest(supplied.encode(), expected.encode())
