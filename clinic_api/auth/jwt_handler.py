from datetime import datetime, timedelta, timezone

import jwt

from clinic_api.core.config import AppConfig


def create_access_token(
    config: AppConfig,
    user_id: int,
    email: str,
    issued_at: datetime | None = None,
) -> str:
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=config.jwt_expires_minutes)
    payload = {
        "sub": str(user_id),
        "id": user_id,
        "email": email,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def decode_access_token(config: AppConfig, token: str) -> dict:
    """Return the claims of ``token``.

    Raises ``jwt.InvalidTokenError`` (or a subclass such as
    ``jwt.ExpiredSignatureError``) for any token that fails verification.
    """
    return jwt.decode(
        token,
        config.jwt_secret,
        algorithms=[config.jwt_algorithm],
        options={"require": ["exp", "iat", "sub"]},
    )
