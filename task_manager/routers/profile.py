from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.auth import get_current_user
from ..core.database import get_db
from ..core.errors import NotFoundError, translate_errors
from ..models.user import User
from ..schemas.common import success
from ..schemas.user import UserOut

router = APIRouter(tags=["profile"])


@router.get("/profile")
@translate_errors
def get_profile(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Return the authenticated user's own record"""
    user = User.find_by_id(db, current_user.id, reload=True)
    if not user:
        raise NotFoundError("User not found..")
    return success("Profile found successfully..", user=UserOut.dump(user))
