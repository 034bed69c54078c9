"""HS256 token helpers shared with the identity provider."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from unihub.config import AuthSettings

REQUIRED_CLAIMS = ["exp", "user_id", "name", "role"]


class TokenPayload(BaseModel):
    """Claims carried by an identity-provider token."""

    user_id: str
    name: str
    role: str
    exp: datetime


class JWTError(Exception):
    """Token missing, malformed, badly signed or expired."""


def create_token(user_id: str, name: str, role: str, settings: AuthSettings) -> str:
    """Sign a token the way the identity provider does.

    UniHub never hands tokens out; this exists for local tooling and tests.
    """
    payload = {
        "user_id": user_id,
        "name": name,
        "role": role,
        "exp": datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry and return the claims.

    Raises:
        JWTError: If any check fails or a required claim is missing
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
        return TokenPayload(**claims)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.MissingRequiredClaimError as e:
        raise JWTError(f"Token is missing the {e.claim} claim")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except ValidationError:
        raise JWTError("Invalid token payload")
