from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import resolvers, schemas

router = APIRouter()

@router.post("/", response_model=schemas.LabelOut)
def create_label(
    label: schemas.LabelCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return resolvers.create_label(db, current_user, label)

@router.get("/{label_id}", response_model=schemas.LabelOut)
def get_label(
    label_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return resolvers.label_by_id(db, current_user, label_id)

@router.put("/{label_id}", response_model=schemas.LabelOut)
def update_label(
    label_id: int,
    label: schemas.LabelUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return resolvers.update_label(db, current_user, label_id, label)

@router.delete("/{label_id}")
def delete_label(
    label_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    resolvers.delete_label(db, current_user, label_id)
    return {"message": "Label deleted"}
