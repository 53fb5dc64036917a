import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

_configured = False


def setup_logging():
    """
    Configures structured JSON logging for the calling service.

    The first call installs a JSON formatter that emits timestamp, level,
    logger name, message, trace_id, span_id and the ``SERVICE_NAME``
    environment variable on stdout. The root logger and the Uvicorn loggers
    share the same stream handler so request logs and application logs have
    one shape. Later calls return the already configured root logger unchanged.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _configured

    root_logger = logging.getLogger()
    if _configured:
        return root_logger

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    formatter = JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s",
        static_fields={"service": os.getenv("SERVICE_NAME", "voicenote")},
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    # httpx logs every request at INFO, including signed media URLs.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    _configured = True
    return root_logger
