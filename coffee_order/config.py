import logging

import pytz

# 매장 시간대 설정
STORE_TIMEZONE = pytz.timezone("Europe/Madrid")

LOG_LEVEL = logging.INFO
