from dataclasses import dataclass
from enum import Enum

from fastapi import Header

from message_gateway.common.errors import AuthError, ValidationError


class BearerStatus(Enum):
    HEADER_MISSING = "header_missing"
    TOKEN_MISSING = "token_missing"
    PRESENT = "present"


@dataclass(frozen=True)
class BearerResult:
    status: BearerStatus
    token: str = ""


def parse_bearer(authorization: str | None) -> BearerResult:
    if not authorization:
        return BearerResult(BearerStatus.HEADER_MISSING)
    parts = authorization.split()
    if len(parts) < 2 or not parts[1]:
        return BearerResult(BearerStatus.TOKEN_MISSING)
    return BearerResult(BearerStatus.PRESENT, parts[1])


def require_bearer_token(authorization: str | None = Header(default=None)) -> str:
    result = parse_bearer(authorization)
    if result.status is BearerStatus.HEADER_MISSING:
        raise AuthError("Authorization header missing")
    if result.status is BearerStatus.TOKEN_MISSING:
        raise AuthError("Kakao access token missing")
    return result.token


def require_access_token(authorization: str | None = Header(default=None)) -> str:
    result = parse_bearer(authorization)
    if result.status is not BearerStatus.PRESENT:
        raise ValidationError("Access token is required")
    return result.token
