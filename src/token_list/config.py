# config.py
import os

PACKAGE_NAME = "token_list"
PACKAGE_VERSION = "0.7.0"

LOG_LEVEL = os.getenv("TOKEN_LIST_LOG_LEVEL", "INFO")
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
)

USER_AGENT = os.getenv("TOKEN_LIST_USER_AGENT", f"token-list-python/{PACKAGE_VERSION}")

DEFAULT_HEADERS = {
    "accept": "application/json",
    "user-agent": USER_AGENT,
}
