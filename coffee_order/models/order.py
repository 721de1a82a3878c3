from datetime import datetime
from typing import Any, Optional, TextIO

from pydantic import Field

from ..config import STORE_TIMEZONE
from ..schemas.notification import ReadyNotification
from ..schemas.order import OrderBase

READY_TEMPLATE = '{name} says: "Hey customer your {beverage} is ready!"'


def _now() -> datetime:
    return datetime.now(STORE_TIMEZONE)


class Order(OrderBase):
    created_at: datetime = Field(default_factory=_now)

    def ready_message(self, name: Any) -> str:
        return READY_TEMPLATE.format(name=name, beverage=self.beverage)

    def ready_notification(self, name: Any) -> ReadyNotification:
        return ReadyNotification(
            staff_name=str(name),
            beverage=str(self.beverage),
            message=self.ready_message(name),
            created_at=_now(),
        )

    def notify(self, name: Any, stream: Optional[TextIO] = None) -> str:
        """Print the pickup call for this order, as said by `name`."""
        message = self.ready_message(name)
        print(message, file=stream)
        return message
