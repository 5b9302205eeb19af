from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base

class ThreadLabel(Base):
    __tablename__ = "discussion_thread_labels"

    thread_id = Column(Integer, ForeignKey("discussion_threads.id"), primary_key=True)
    label_id = Column(Integer, ForeignKey("labels.id"), primary_key=True)

    # Relationships
    thread = relationship("DiscussionThread", back_populates="labels")
    label = relationship("Label", back_populates="threads")
