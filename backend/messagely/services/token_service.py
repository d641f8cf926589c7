"""JWT signing and verification helpers.

Uses PyJWT. Tokens carry only the claims they are given; no expiry is added,
since issued tokens are never revoked or refreshed by this service.
"""

from typing import Any, Dict, Optional

import jwt


def sign_token(claims: Dict[str, Any], secret: str, algorithm: str = "HS256") -> str:
    """Sign claims into an encoded JWT string."""
    return jwt.encode(dict(claims), secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> Optional[Dict[str, Any]]:
    """Verify a JWT and return its claims.

    Returns:
        The decoded claims, or ``None`` if the token is malformed or has an
        invalid signature.
    """
    try:
        return jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.InvalidTokenError:
        return None
