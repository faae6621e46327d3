"""JWT authentication provider implementation.

Tokens are issued by the platform's identity service and signed with a
shared HS256 secret. Expected payload:
    {
        "sub": "user@example.com",
        "role": "admin",
        "exp": 1234567890
    }
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from core.config import settings
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)


class JWTAuthProvider:
    """JWT-based authentication provider.

    Only verifies tokens; ``create_token`` exists for tests and local tooling.
    """

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the caller.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_aud": False},
            )
        except JWTError as exc:
            logger.debug("Rejected bearer token: %s", exc)
            return None

        subject = payload.get("sub") or payload.get("email")
        if not subject:
            return None

        return TokenUser(email=subject, role=payload.get("role"))

    def create_token(self, user: TokenUser) -> str:
        """
        Create a signed JWT for a user (used for tests).

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)

        payload: dict = {
            "sub": user.email,
            "exp": expire,
        }
        if user.role:
            payload["role"] = user.role

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
