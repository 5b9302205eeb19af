from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.security import get_optional_current_user
from app.db.models.user import User
from app.db.session import get_db


async def get_context(
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_current_user),
) -> dict:
    """Per-request GraphQL context: the DB session and the caller (None when anonymous)."""
    return {"db": db, "current_user": current_user}
