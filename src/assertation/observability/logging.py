import json
import logging
import sys

from loguru import logger

from assertation.observability.context import ctx_validation_id


def validation_id_patcher(record):
    record["extra"]["validation_id"] = ctx_validation_id.get()


class InterceptHandler(logging.Handler):
    """
    Default handler from examples in loguru documentaion.
    See https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
    """

    def emit(self, record: logging.LogRecord):
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def sink_serializer(message):
    record = message.record
    simplified = {
        "level": record["level"].name,
        "message": record["message"],
        "timestamp": record["time"].timestamp(),
        "validation_id": record["extra"].get("validation_id", "-"),
    }
    serialized = json.dumps(simplified)
    print(serialized, file=sys.stdout)


def setup_logging(config: dict, intercept: bool = False):
    logging_level = config.get("logging_level") or "warning"
    logging_format = config.get("logging_format") or "text"

    if intercept:
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    if logging_level.lower() == "error":
        service_log_level = logging.ERROR
    elif logging_level.lower() == "warning":
        service_log_level = logging.WARNING
    elif logging_level.lower() == "info":
        service_log_level = logging.INFO
    else:
        service_log_level = logging.DEBUG

    if logging_format.lower() == "json":
        logger.configure(
            handlers=[
                {
                    "sink": sink_serializer,
                    "level": service_log_level,
                }
            ],
            patcher=validation_id_patcher,
        )

    else:
        fmt = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <red> {extra[validation_id]} </red> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

        logger.configure(
            handlers=[
                {
                    "sink": sys.stdout,
                    "level": service_log_level,
                    "format": fmt,
                }
            ],
            patcher=validation_id_patcher,
        )
