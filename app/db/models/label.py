from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from app.db.session import Base

class Label(Base):
    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    color = Column(String, nullable=False)

    # Owning organization; never reassigned after creation
    org_id = Column(Integer, ForeignKey("orgs.id"), nullable=False, index=True)

    # Relationships
    org = relationship("Org", back_populates="labels")
    threads = relationship("ThreadLabel", back_populates="label", cascade="all, delete")
