"""Credential Store: password hashing and signed session tokens.

Invariants:
    - Passwords are stored only as bcrypt digests (passlib)
    - Session tokens are HS256 JWTs carrying user_id, email, role, iat, exp
    - validate_session raises InvalidSessionError for every failure (structure,
      signature, expiry) without telling the caller which one
    - verify_password raises CredentialMismatchError; it never says whether the
      digest or the password was at fault

Design Decisions:
    - passlib's bcrypt handler and PyJWT: library failures are wrapped into
      HashingError/SigningError so callers only see the core/errors.py hierarchy
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from passlib.hash import bcrypt

from floormap.core.domain_types import SessionClaims
from floormap.core.errors import (
    CredentialMismatchError, HashingError, InvalidSessionError, SigningError,
)

logger = logging.getLogger(__name__)

SESSION_TTL_HOURS = 24
_REQUIRED_CLAIMS = ("user_id", "email", "role", "exp", "iat")


def hash_password(password: str) -> str:
    """One-way salted hash."""
    try:
        return bcrypt.hash(password)
    except (ValueError, TypeError, RuntimeError) as e:
        raise HashingError(str(e)) from e


def verify_password(digest: str, password: str) -> None:
    """Raise CredentialMismatchError unless password matches digest."""
    try:
        ok = bcrypt.verify(password, digest)
    except (ValueError, TypeError):
        ok = False
    if not ok:
        raise CredentialMismatchError()


def issue_session(
    user_id: str,
    email: str,
    role: str,
    secret: str,
    ttl_hours: int = SESSION_TTL_HOURS,
    algorithm: str = "HS256",
) -> str:
    """Sign a time-limited bearer token embedding identity claims."""
    if not secret:
        raise SigningError("empty signing secret")
    now = datetime.now(timezone.utc)
    payload = {
        "user_id": user_id,
        "email": email,
        "role": role,
        "iat": now,
        "exp": now + timedelta(hours=ttl_hours),
    }
    try:
        return jwt.encode(payload, secret, algorithm=algorithm)
    except (jwt.PyJWTError, TypeError, ValueError, NotImplementedError) as e:
        raise SigningError(str(e)) from e


def validate_session(token: str, secret: str, algorithm: str = "HS256") -> SessionClaims:
    """Verify signature and expiry; return the identity claims."""
    try:
        data = jwt.decode(
            token, secret, algorithms=[algorithm],
            options={"require": list(_REQUIRED_CLAIMS)},
        )
    except jwt.PyJWTError as e:
        logger.debug(f"Session rejected: {type(e).__name__}")
        raise InvalidSessionError() from e
    if not all(isinstance(data.get(k), str) and data.get(k) for k in ("user_id", "email", "role")):
        raise InvalidSessionError()
    return SessionClaims(
        user_id=data["user_id"],
        email=data["email"],
        role=data["role"],
        issued_at=datetime.fromtimestamp(data["iat"], tz=timezone.utc),
        expires_at=datetime.fromtimestamp(data["exp"], tz=timezone.utc),
    )
