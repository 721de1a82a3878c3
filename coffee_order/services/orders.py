import logging
from typing import Any, Mapping, Optional, TextIO

from ..errors import MissingFieldError
from ..models.order import Order
from ..schemas.order import OrderCreate

logger = logging.getLogger(__name__)

# 수업 예제 주문
LESSON_ORDER = {
    "customer": "Ironhack",
    "beverage": "cappucino",
    "price": 10,
    "sugar": False,
    "extraFoam": True,
}
LESSON_BARISTA = "Miki"


def place_order(data: Mapping[str, Any]) -> Order:
    """Validate a payload as OrderCreate and turn it into a freshly stamped Order."""
    logger.info(f"새로운 주문 요청: {dict(data)}")
    try:
        payload = OrderCreate.model_validate(dict(data))
    except MissingFieldError as e:
        logger.warning(f"주문 필드 누락: {', '.join(e.fields)}")
        raise

    order = Order(**payload.model_dump())
    logger.info(f"주문 접수 완료: {order.customer} - {order.beverage}")
    return order


def call_customer(order: Order, barista: Any, stream: Optional[TextIO] = None) -> str:
    logger.info(f"손님 호출: {order.customer} ({order.beverage}) by {barista}")
    return order.notify(barista, stream=stream)
