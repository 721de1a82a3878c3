from pydantic import BaseModel
from datetime import datetime


class ReadyNotification(BaseModel):
    staff_name: str
    beverage: str
    message: str
    created_at: datetime
