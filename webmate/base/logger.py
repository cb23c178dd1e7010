import logging
import os
from datetime import datetime


class Logger:
    _instance = None
    _initialized = False

    LOGGER_NAME = "webmate"

    # Default log levels
    DEFAULT_FILE_LEVEL = "DEBUG"
    DEFAULT_CONSOLE_LEVEL = "WARNING"

    # Map string levels to logging constants
    LOG_LEVELS = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL
    }

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_path=None, file_level=None, console_level=None):
        if not Logger._initialized:
            self.log_file = None

            self.logger = logging.getLogger(self.LOGGER_NAME)

            # Set propagate to False to prevent duplicate logs
            self.logger.propagate = False

            self.logger.setLevel(logging.DEBUG)

            # Clear any existing handlers to avoid duplicates
            self.logger.handlers.clear()

            formatter = logging.Formatter(
                '%(asctime)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )

            console_handler = logging.StreamHandler()
            console_handler.setLevel(self._to_level(console_level, self.DEFAULT_CONSOLE_LEVEL))
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

            # File logging only when a directory is given
            if log_path:
                os.makedirs(log_path, exist_ok=True)
                timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                self.log_file = os.path.join(log_path, f'webmate_sdk_{timestamp}.log')

                file_handler = logging.FileHandler(self.log_file)
                file_handler.setLevel(self._to_level(file_level, self.DEFAULT_FILE_LEVEL))
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

            Logger._initialized = True

    @classmethod
    def _to_level(cls, level, default):
        return cls.LOG_LEVELS.get((level or default).upper(), cls.LOG_LEVELS[default])

    @classmethod
    def get_instance(cls, log_path=None, file_level=None, console_level=None):
        if cls._instance is None or not cls._initialized:
            cls._instance = Logger(log_path, file_level, console_level)
        return cls._instance

    @classmethod
    def reset(cls):
        """Drop the configured handlers so the next get_instance() starts over"""
        if cls._instance is not None and cls._initialized:
            for handler in list(cls._instance.logger.handlers):
                handler.close()
            cls._instance.logger.handlers.clear()
        cls._instance = None
        cls._initialized = False

    @classmethod
    def debug(cls, message):
        cls.get_instance().logger.debug(message)

    @classmethod
    def info(cls, message):
        cls.get_instance().logger.info(message)

    @classmethod
    def warning(cls, message):
        cls.get_instance().logger.warning(message)

    @classmethod
    def error(cls, message):
        """Log error level message"""
        cls.get_instance().logger.error(message)
