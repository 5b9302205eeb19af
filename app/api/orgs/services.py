import logging

from sqlalchemy.orm import Session
from app.core.errors import NotFoundError
from app.db.models.org import Org, OrgMember
from app.db.models.user import User
from . import schemas

logger = logging.getLogger(__name__)

def org_by_id(db: Session, org_id: int) -> Org:
    org = db.query(Org).filter(Org.id == org_id).first()
    if org is None:
        raise NotFoundError(f"org not found: {org_id}")
    return org

def create_org(db: Session, org: schemas.OrgCreate, creator_id: int):
    db_org = Org(**org.model_dump())
    db.add(db_org)
    db.flush()
    # The creator is the first member
    db.add(OrgMember(org_id=db_org.id, user_id=creator_id))
    db.commit()
    db.refresh(db_org)
    logger.info("Created org %s (%s) for user %s", db_org.id, db_org.name, creator_id)
    return db_org

def add_org_member(db: Session, org_id: int, user_id: int):
    if db.query(User).filter(User.id == user_id).first() is None:
        raise NotFoundError(f"user not found: {user_id}")

    existing = db.query(OrgMember).filter_by(org_id=org_id, user_id=user_id).first()
    if existing:
        return existing

    member = OrgMember(org_id=org_id, user_id=user_id)
    db.add(member)
    db.commit()
    db.refresh(member)
    logger.info("Added user %s to org %s", user_id, org_id)
    return member
