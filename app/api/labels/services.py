import logging
from typing import Iterable

from sqlalchemy.orm import Session
from app.db.models.label import Label
from app.db.models.thread_label import ThreadLabel
from . import schemas

logger = logging.getLogger(__name__)

def create_label(db: Session, label: schemas.LabelCreate):
    db_label = Label(**label.model_dump())
    db.add(db_label)
    db.commit()
    db.refresh(db_label)
    return db_label

def get_labels(db: Session, org_id: int):
    return db.query(Label).filter(Label.org_id == org_id).order_by(Label.id).all()

def get_label(db: Session, label_id: int):
    return db.query(Label).filter(Label.id == label_id).first()

def update_label(db: Session, label_id: int, label: schemas.LabelUpdate):
    db_label = get_label(db, label_id)
    if db_label:
        for key, value in label.model_dump(exclude_none=True).items():
            setattr(db_label, key, value)
        db.commit()
        db.refresh(db_label)
    return db_label

def delete_label(db: Session, label_id: int):
    db_label = get_label(db, label_id)
    if db_label:
        db.delete(db_label)
        db.commit()
    return db_label

# ---------------------------
# Thread <-> label links
# ---------------------------

def get_thread_labels(db: Session, thread_id: int):
    return (
        db.query(ThreadLabel)
        .filter(ThreadLabel.thread_id == thread_id)
        .order_by(ThreadLabel.label_id)
        .all()
    )

def add_labels_to_thread(db: Session, thread_id: int, label_ids: Iterable[int]):
    label_ids = list(dict.fromkeys(label_ids))
    existing = {
        link.label_id
        for link in db.query(ThreadLabel).filter(
            ThreadLabel.thread_id == thread_id, ThreadLabel.label_id.in_(label_ids)
        )
    }
    # Already-linked labels are skipped
    for label_id in label_ids:
        if label_id not in existing:
            db.add(ThreadLabel(thread_id=thread_id, label_id=label_id))
    db.commit()
    logger.debug("Linked labels %s to thread %s (%d already linked)", label_ids, thread_id, len(existing))

def remove_labels_from_thread(db: Session, thread_id: int, label_ids: Iterable[int]):
    label_ids = list(label_ids)
    removed = (
        db.query(ThreadLabel)
        .filter(ThreadLabel.thread_id == thread_id, ThreadLabel.label_id.in_(label_ids))
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.debug("Unlinked %d of labels %s from thread %s", removed, label_ids, thread_id)
