import logging

ROOT_LOGGER_NAME = "fastcrypto"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _level(name):
    """Chuyển tên level (str) sang logging level"""
    try:
        return LEVELS[str(name).lower()]
    except KeyError:
        raise ValueError(f"Unknown log level: {name}")


def configure_logging(level="warning", log_file=None):
    """Cấu hình level và file handler cho toàn bộ package"""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(_level(level))

    if log_file:
        already = any(
            isinstance(h, logging.FileHandler) and h.baseFilename.endswith(str(log_file))
            for h in root.handlers
        )
        if not already:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(file_handler)
    return root


class Logger:
    """Logging utility cho toàn bộ package"""

    def __init__(self, name, log_file=None):
        self.logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

        # Handler gắn một lần duy nhất cho mỗi logger
        if self.logger.handlers:
            return

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(file_handler)

    def log(self, message, level="info"):
        """Log message"""
        if level == "debug":
            self.logger.debug(message)
        elif level == "info":
            self.logger.info(message)
        elif level == "warning":
            self.logger.warning(message)
        elif level == "error":
            self.logger.error(message)
