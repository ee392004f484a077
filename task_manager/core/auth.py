"""
Authentication dependency for protected routes.

Reads the access token from the Authorization header, verifies it and loads
the user it was issued for.
"""
import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from .database import get_db
from .errors import AuthenticationError, ValidationError, translate_errors
from .jwt_handler import verify_access_token
from ..models.user import User

logger = logging.getLogger(__name__)

# The frontend sends the bare token; "Bearer <token>" is accepted as well
authorization_header = APIKeyHeader(
    name="Authorization",
    scheme_name="Access Token",
    description="Access token issued by /login",
    auto_error=False,
)


def extract_token(header_value: Optional[str]) -> Optional[str]:
    if not header_value:
        return None
    scheme, _, credentials = header_value.strip().partition(" ")
    if scheme.lower() == "bearer":
        return credentials.strip() or None
    return header_value.strip() or None


@translate_errors
def get_current_user(
    authorization: Optional[str] = Depends(authorization_header),
    db: Session = Depends(get_db),
) -> User:
    """
    Dependency to get the current authenticated user.

    Raises:
        ValidationError: If no token was sent
        AuthenticationError: If the token is invalid or its user is gone
    """
    token = extract_token(authorization)
    if not token:
        raise ValidationError("Token not found")

    payload = verify_access_token(token)
    if not payload or not payload.get("sub"):
        logger.warning("Token verification failed")
        raise AuthenticationError("Invalid token")

    user = User.find_by_id(db, payload["sub"])
    if not user:
        logger.warning(f"Token issued for unknown user {payload['sub']}")
        raise AuthenticationError("User not found")
    return user
