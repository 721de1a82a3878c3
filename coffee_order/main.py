import logging

from .config import LOG_LEVEL
from .services.orders import LESSON_BARISTA, LESSON_ORDER, call_customer, place_order


def main():
    # 로깅 설정
    logging.basicConfig(level=LOG_LEVEL)
    order = place_order(LESSON_ORDER)
    call_customer(order, LESSON_BARISTA)


if __name__ == "__main__":
    main()
