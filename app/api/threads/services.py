import logging

from sqlalchemy.orm import Session
from app.core.errors import NotFoundError
from app.db.models.discussion_thread import DiscussionThread
from . import schemas

logger = logging.getLogger(__name__)

def thread_by_id(db: Session, thread_id: int) -> DiscussionThread:
    thread = db.query(DiscussionThread).filter(DiscussionThread.id == thread_id).first()
    if thread is None:
        raise NotFoundError(f"discussion thread not found: {thread_id}")
    return thread

def create_thread(db: Session, thread: schemas.ThreadCreate, author_id: int):
    db_thread = DiscussionThread(**thread.model_dump(), author_user_id=author_id)
    db.add(db_thread)
    db.commit()
    db.refresh(db_thread)
    logger.info("Created discussion thread %s", db_thread.id)
    return db_thread
