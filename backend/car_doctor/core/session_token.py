"""Session Token Codec — issue and verify signed, time-limited identity tokens.

Invariants:
    - Tokens are HS256 JWTs carrying the identity claim plus iat/exp
    - exp is always iat + ttl_seconds (default one hour)
    - verify_token returns the claim without the registered iat/exp fields
    - Every failure (malformed, bad signature, expired) raises InvalidTokenError,
      whose message never includes the secret or the token

Design Decisions:
    - Pure functions taking the secret explicitly; callers pass settings in
    - `now` is injectable so expiry is testable without sleeping
"""

from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from car_doctor.core.errors import InvalidTokenError

ALGORITHM = "HS256"
DEFAULT_TTL_SECONDS = 60 * 60

_REGISTERED_CLAIMS = ("iat", "exp")


def issue_token(
    claim: dict,
    secret: str,
    ttl_seconds: int = DEFAULT_TTL_SECONDS,
    now: datetime | None = None,
) -> str:
    """Sign `claim` into a token that expires `ttl_seconds` after `now`."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {k: v for k, v in claim.items() if k not in _REGISTERED_CLAIMS}
    payload["iat"] = int(issued_at.timestamp())
    payload["exp"] = int((issued_at + timedelta(seconds=ttl_seconds)).timestamp())
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def verify_token(token: str, secret: str, now: datetime | None = None) -> dict:
    """Return the identity claim embedded in `token`.

    Raises InvalidTokenError on malformed token, bad signature or expiry.
    """
    try:
        payload = jwt.decode(
            token, secret, algorithms=[ALGORITHM],
            options={"verify_exp": now is None},
        )
    except ExpiredSignatureError:
        raise InvalidTokenError("expired") from None
    except JWTError:
        raise InvalidTokenError("invalid") from None

    if now is not None:
        exp = payload.get("exp")
        if exp is None or int(exp) < int(now.timestamp()):
            raise InvalidTokenError("expired")

    return {k: v for k, v in payload.items() if k not in _REGISTERED_CLAIMS}
