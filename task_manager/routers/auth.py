import logging
from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.database import get_db
from ..core.errors import ConflictError, ValidationError, translate_errors
from ..core.jwt_handler import create_access_token
from ..models.user import User
from ..schemas.common import MessageResponse, success
from ..schemas.user import SignupPayload, LoginPayload, LoginUserOut
from ..utils.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse)
@translate_errors
def signup(payload: Optional[SignupPayload] = None, db: Session = Depends(get_db)):
    """Register a new user"""
    data = (payload or SignupPayload()).parse()

    # Not atomic with the insert below; the unique index rejects a racing duplicate
    if User.find_by_email(db, data.email):
        raise ConflictError("This email is already registered")

    user = User.create(
        db,
        name=data.name,
        email=data.email,
        password=get_password_hash(data.password),
    )
    logger.info(f"Registered user {user.id}")
    return success("Congratulations!! Account has been created for you..")


@router.post("/login")
@translate_errors
def login(payload: Optional[LoginPayload] = None, db: Session = Depends(get_db)):
    """Check credentials and issue an access token"""
    data = (payload or LoginPayload()).parse()

    user = User.find_by_email(db, data.email)
    if not user:
        raise ValidationError("This email is not registered!!")
    if not verify_password(data.password, user.password):
        logger.info(f"Rejected login for user {user.id}: wrong password")
        raise ValidationError("Password incorrect!!")

    token = create_access_token(user.id)
    logger.info(f"User {user.id} logged in")
    # The stored hash stays in the payload for existing clients
    return success("Login successful..", token=token, user=LoginUserOut.dump(user))
