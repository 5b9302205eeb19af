import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.errors import PermissionDeniedError
from app.db.models.org import OrgMember
from app.db.models.user import User

logger = logging.getLogger(__name__)


def is_org_member(db: Session, org_id: int, user_id: int) -> bool:
    return db.query(OrgMember).filter_by(org_id=org_id, user_id=user_id).first() is not None


def check_org_access(db: Session, user: Optional[User], org_id: int) -> None:
    """
    Allow site admins and members of the organization; raise
    PermissionDeniedError for everyone else, anonymous callers included.
    """
    if user is None:
        logger.warning("Anonymous access to org %s denied", org_id)
        raise PermissionDeniedError("must be authenticated")

    if user.is_site_admin:
        return

    if not is_org_member(db, org_id, user.id):
        logger.warning("User %s is not a member of org %s", user.id, org_id)
        raise PermissionDeniedError("current user is not an org member")
