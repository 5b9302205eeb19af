from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user, get_optional_current_user
from app.db.models.user import User
from app.api.labels import resolvers
from app.api.labels.labelable import LabelableKind, LabelableRef
from app.api.labels.schemas import LabelConnectionOut
from app.api.threads.schemas import ThreadOut
from app.api.thread_labels import schemas

router = APIRouter()


def _thread_ref(thread_id: int) -> LabelableRef:
    return LabelableRef(LabelableKind.DISCUSSION_THREAD, thread_id)


@router.get("/{thread_id}/labels", response_model=LabelConnectionOut)
def list_thread_labels(
    thread_id: int,
    first: Optional[int] = Query(default=None, ge=0),
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_current_user)
):
    connection = resolvers.labels_for(db, current_user, _thread_ref(thread_id), first=first)
    return LabelConnectionOut.from_connection(connection)

@router.post("/{thread_id}/labels", response_model=ThreadOut)
def add_labels(
    thread_id: int,
    payload: schemas.ThreadLabelsChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return resolvers.add_labels_to_labelable(db, current_user, _thread_ref(thread_id), payload.label_ids)

@router.delete("/{thread_id}/labels", response_model=ThreadOut)
def remove_labels(
    thread_id: int,
    payload: schemas.ThreadLabelsChange,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return resolvers.remove_labels_from_labelable(db, current_user, _thread_ref(thread_id), payload.label_ids)
