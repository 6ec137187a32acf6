from loguru import logger

# Library code stays quiet until an entry point calls config.setup_logging()
logger.disable("reversi")
