import logging

API_BASE_URL = "https://restcountries.com"
API_VERSION = "v3.1"
API_FIELDS = "name,flags,population"
REQUEST_TIMEOUT = 15

SEARCH_DEBOUNCE_MS = 500
# 0 disables the staggered card reveal
CARD_REVEAL_DELAY_MS = 0

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILE = "countryfinder.log"

def configure_logging():
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(LOG_FILE, encoding="utf-8"),
            logging.StreamHandler()
        ],
    )
