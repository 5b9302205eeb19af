from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.post("/", response_model=schemas.ThreadOut)
def create_thread(
    thread: schemas.ThreadCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_thread(db, thread, current_user.id)

@router.get("/{thread_id}", response_model=schemas.ThreadOut)
def read_thread(thread_id: int, db: Session = Depends(get_db)):
    return services.thread_by_id(db, thread_id)
