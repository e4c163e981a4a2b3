# utils/logging_config.py
import logging
import logging.config
import os


def setup_logging(app):
    """Console logging always; a rotating file log when LOG_DIR is configured."""
    level = app.config.get("LOG_LEVEL") or ("DEBUG" if app.debug else "INFO")
    log_dir = app.config.get("LOG_DIR")

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "simple",
            "stream": "ext://sys.stdout",
        },
    }
    root_handlers = ["console"]

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "INFO",
            "formatter": "detailed",
            "filename": os.path.join(log_dir, "recruitment.log"),
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "encoding": "utf8",
        }
        root_handlers.append("file")

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "[%(asctime)s] %(levelname)s in %(module)s [%(pathname)s:%(lineno)d]: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {
                "format": "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": root_handlers,
                "level": level,
            },
            "sqlalchemy.engine": {
                "level": "INFO" if app.debug else "WARNING",
            },
        },
    })

    app.logger.setLevel(level)
    app.logger.debug("Logging configured (level=%s, log_dir=%s)", level, log_dir)
