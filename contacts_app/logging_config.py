# contacts_app/logging_config.py
import logging
import os
import time
from logging.handlers import RotatingFileHandler
from flask import g, request

ACCESS_LOGGER = 'contacts_app.access'


def setup_logging(app):
    """
    Configures the root logger from the app config. Production runs at INFO,
    every other APP_ENV at DEBUG. A rotating file handler is added when
    LOG_FILE is set.
    """
    production = app.config.get('APP_ENV') == 'production'
    level = logging.INFO if production else logging.DEBUG
    log_format = app.config.get('LOG_FORMAT', '%(asctime)s - %(levelname)s - %(message)s')

    logging.basicConfig(level=level, format=log_format)
    root = logging.getLogger()
    root.setLevel(level)
    app.logger.setLevel(level)

    log_file = app.config.get('LOG_FILE')
    if log_file and not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=app.config.get('LOG_MAX_BYTES', 10000000),
            backupCount=app.config.get('LOG_BACKUP_COUNT', 5)
        )
        handler.setFormatter(logging.Formatter(log_format))
        root.addHandler(handler)


def register_access_log(app):
    """One log line per request: short in production, detailed otherwise."""
    access_logger = logging.getLogger(ACCESS_LOGGER)
    production = app.config.get('APP_ENV') == 'production'

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        if production:
            access_logger.info(f"{request.method} {request.full_path.rstrip('?')} {response.status_code}")
        else:
            duration_ms = (time.perf_counter() - g.get('request_started', time.perf_counter())) * 1000
            access_logger.info(
                f"{request.remote_addr} {request.method} {request.full_path.rstrip('?')} "
                f"{response.status_code} {duration_ms:.1f}ms"
            )
        return response
