from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.access import check_org_access
from app.core.security import get_current_user
from app.db.models.org import Org
from app.db.models.user import User
from app.api.labels import resolvers as label_resolvers
from app.api.labels.schemas import LabelConnectionOut
from . import schemas, services

router = APIRouter()

@router.post("/", response_model=schemas.OrgOut)
def create_org(
    org: schemas.OrgCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if db.query(Org).filter(Org.name == org.name).first():
        raise HTTPException(status_code=400, detail="Org name already taken")
    return services.create_org(db, org, current_user.id)

@router.get("/{org_id}", response_model=schemas.OrgOut)
def read_org(org_id: int, db: Session = Depends(get_db)):
    return services.org_by_id(db, org_id)

@router.post("/{org_id}/members", response_model=schemas.OrgMemberOut)
def add_member(
    org_id: int,
    payload: schemas.OrgMemberCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    services.org_by_id(db, org_id)
    # 🚨 SECURITY: Only org members and site admins may add members.
    check_org_access(db, current_user, org_id)
    return services.add_org_member(db, org_id, payload.user_id)

@router.get("/{org_id}/labels", response_model=LabelConnectionOut)
def read_org_labels(
    org_id: int,
    first: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    connection = label_resolvers.org_labels(db, current_user, org_id, first=first)
    return LabelConnectionOut.from_connection(connection)
