import os
import sys
from dotenv import load_dotenv
from loguru import logger

load_dotenv()

FALSE_VALUES = ["0", "false", "no", "off"]


def get_log_level() -> str:
    return os.getenv("REVERSI_LOG_LEVEL", "WARNING").upper()


def get_show_hints() -> bool:
    value = os.getenv("REVERSI_SHOW_HINTS", "1")
    return value.strip().lower() not in FALSE_VALUES


def setup_logging() -> None:
    logger.remove()
    logger.add(sys.stderr, level=get_log_level())
    logger.enable("reversi")
