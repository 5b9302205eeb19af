from pydantic import BaseModel, Field
from typing import Optional

from app.api.labels.connection import LabelConnection

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"

class LabelBase(BaseModel):
    name: str
    description: Optional[str] = None

class LabelCreate(LabelBase):
    org_id: int
    color: str = Field(pattern=HEX_COLOR_PATTERN)

class LabelUpdate(BaseModel):
    # None leaves the stored value unchanged
    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)

class LabelOut(LabelBase):
    id: int
    org_id: int
    color: str

    model_config = {
        "from_attributes": True
    }

class PageInfoOut(BaseModel):
    has_next_page: bool

class LabelConnectionOut(BaseModel):
    nodes: list[LabelOut]
    total_count: int
    page_info: PageInfoOut

    @classmethod
    def from_connection(cls, connection: LabelConnection) -> "LabelConnectionOut":
        return cls(
            nodes=[LabelOut.model_validate(label) for label in connection.nodes()],
            total_count=connection.total_count(),
            page_info=PageInfoOut(has_next_page=connection.has_next_page()),
        )
