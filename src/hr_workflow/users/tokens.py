from __future__ import annotations

from dataclasses import dataclass

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from ..core.constants import DEFAULT_TOKEN_MAX_AGE
from ..core.enums import Role
from ..core.exceptions import AuthenticationError


@dataclass(frozen=True)
class Identity:
    """Verified caller, decoded from a bearer token."""

    user_id: int
    email: str
    name: str
    role: Role


class TokenService:
    """Issues and verifies signed bearer tokens carrying the caller's role."""

    _SALT = "hr-workflow-auth"

    def __init__(self, secret_key: str, *, max_age: int = DEFAULT_TOKEN_MAX_AGE):
        self._serializer = URLSafeTimedSerializer(secret_key, salt=self._SALT)
        self._max_age = int(max_age)

    def issue(self, identity: Identity) -> str:
        return self._serializer.dumps(
            {
                "id": identity.user_id,
                "email": identity.email,
                "name": identity.name,
                "role": identity.role.value,
            }
        )

    def verify(self, token: str) -> Identity:
        try:
            data = self._serializer.loads(token, max_age=self._max_age)
        except SignatureExpired:
            raise AuthenticationError("Session expired, please log in again")
        except BadSignature:
            raise AuthenticationError("Invalid token")

        try:
            return Identity(
                user_id=int(data["id"]),
                email=str(data["email"]),
                name=str(data.get("name") or ""),
                role=Role(data["role"]),
            )
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Invalid token")
