from .logger import LOG_NAME, LoggingConfig, get_logger, init_logging, init_logging_from_config

__all__ = ["LOG_NAME", "LoggingConfig", "get_logger", "init_logging", "init_logging_from_config"]
