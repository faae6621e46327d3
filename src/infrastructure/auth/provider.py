"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class TokenUser:
    """Caller identity carried by a bearer token.

    The token subject is the caller's email. Roles are informational only;
    every authenticated caller may use every v1 route.
    """

    email: str
    role: Optional[str] = None


class IAuthProvider(Protocol):
    """Verifies bearer tokens issued by the identity service."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """Return the caller for a valid token, ``None`` otherwise."""
        ...

    def create_token(self, user: TokenUser) -> str:
        """Sign a token for ``user``. Used by tests and local tooling."""
        ...
