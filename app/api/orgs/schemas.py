from pydantic import BaseModel
from typing import Optional

class OrgBase(BaseModel):
    name: str
    display_name: Optional[str] = None

class OrgCreate(OrgBase):
    pass

class OrgOut(OrgBase):
    id: int

    model_config = {
        "from_attributes": True
    }

class OrgMemberCreate(BaseModel):
    user_id: int

class OrgMemberOut(OrgMemberCreate):
    org_id: int

    model_config = {
        "from_attributes": True
    }
