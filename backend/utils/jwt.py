from datetime import datetime, timedelta, timezone
from jose import jwt, ExpiredSignatureError, JWTError
from config.env import JWT_SECRET, JWT_ALGORITHM, ACCESS_TOKEN_DAYS


class TokenError(Exception):
    """Raised when a session credential cannot be trusted."""


class InvalidToken(TokenError):
    pass


class TokenExpired(TokenError):
    pass


def _require_jwt_secret() -> str:
    secret = (JWT_SECRET or "").strip()
    if not secret:
        raise RuntimeError("JWT_SECRET is not configured")
    return secret


def create_access_token(identity: dict) -> str:
    """
    Sign a session credential for `{"email": ...}`.
    Expiry is fixed at ACCESS_TOKEN_DAYS from now.
    """
    email = identity.get("email")
    if not email:
        raise ValueError("identity must carry an email")

    now = datetime.now(timezone.utc)
    payload = {
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=ACCESS_TOKEN_DAYS),
    }
    return jwt.encode(payload, _require_jwt_secret(), algorithm=JWT_ALGORITHM)


def decode_token(token: str | None) -> dict:
    """
    Verify signature and expiry and return the identity claim.
    Raises InvalidToken or TokenExpired.
    """
    if not token:
        raise InvalidToken("Token missing")

    secret = _require_jwt_secret()
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpired("Token has expired")
    except JWTError as e:
        raise InvalidToken(f"Invalid token: {e}")

    email = payload.get("email")
    if not email or not isinstance(email, str):
        raise InvalidToken("Invalid token payload")

    return {"email": email}
