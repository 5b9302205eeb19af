from pydantic import BaseModel, Field

class ThreadLabelsChange(BaseModel):
    label_ids: list[int] = Field(min_length=1)
