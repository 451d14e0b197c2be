import logging

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from clinic_api.auth import jwt_handler
from clinic_api.core.config import AppConfig
from clinic_api.core.errors import InvalidTokenException, MissingTokenException

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    config: AppConfig = Depends(get_config),
) -> dict:
    if credentials is None or not credentials.credentials.strip():
        raise MissingTokenException()

    try:
        payload = jwt_handler.decode_access_token(config, credentials.credentials)
    except jwt.InvalidTokenError as exc:
        logger.info("Rejected bearer token on %s: %s", request.url.path, type(exc).__name__)
        raise InvalidTokenException() from exc

    request.state.user = payload
    return payload
