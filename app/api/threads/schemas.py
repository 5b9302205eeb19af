from datetime import datetime
from typing import Optional

from pydantic import BaseModel

class ThreadCreate(BaseModel):
    title: str

class ThreadOut(ThreadCreate):
    id: int
    author_user_id: int
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
