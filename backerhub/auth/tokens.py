# backerhub/auth/tokens.py

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt

logger = logging.getLogger(__name__)


class InvalidToken(Exception):
    """Raised for any token that fails signature, structure or claim checks."""


@dataclass(frozen=True)
class TokenClaims:
    user_id: int

    @classmethod
    def from_payload(cls, payload):
        user_id = payload.get("user_id")
        # bool is an int subclass, reject it explicitly
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise InvalidToken("user_id claim is missing or not an integer")
        return cls(user_id=user_id)


class TokenService:
    """Issues and validates the signed bearer tokens used by the JSON API."""

    def __init__(self, secret_key, algorithm="HS256", expires_seconds=0):
        if not secret_key:
            raise ValueError("A secret key is required to sign tokens")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_seconds = expires_seconds

    @classmethod
    def from_config(cls, config):
        return cls(
            config["JWT_SECRET_KEY"],
            algorithm=config.get("JWT_ALGORITHM", "HS256"),
            expires_seconds=config.get("JWT_EXPIRES_SECONDS", 0),
        )

    def generate_token(self, user_id):
        payload = {"user_id": int(user_id)}
        if self.expires_seconds:
            payload["exp"] = datetime.now(timezone.utc) + timedelta(seconds=self.expires_seconds)
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def validate_token(self, token):
        """
        Verifies the signature and decodes the claim set into ``TokenClaims``.
        Only the configured algorithm is accepted.
        """
        if not token:
            raise InvalidToken("empty token")
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            logger.warning(f"Token rejected: {type(e).__name__}")
            raise InvalidToken(str(e)) from e
        return TokenClaims.from_payload(payload)
