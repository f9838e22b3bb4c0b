from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class ConnectionCreate(BaseModel):
    connection_id: str


class ConnectionResponse(BaseModel):
    id: str
    user_id: str
    connection_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
