# extensions/logger.py
import os, sys, logging, json, uuid, time
from logging.handlers import RotatingFileHandler
from flask import g, request, has_request_context
from werkzeug.exceptions import HTTPException

_REQUEST_ID_KEY = "request_id"
_REQUEST_ID_HEADER = "X-Request-ID"


class JsonFormatter(logging.Formatter):
    def __init__(self, app_name: str = None):
        super().__init__()
        self.app_name = app_name

    def format(self, record):
        data = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if self.app_name:
            data["app"] = self.app_name
        if hasattr(record, "request_id"):
            data["request_id"] = record.request_id
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


class RequestIdFilter(logging.Filter):
    def filter(self, record):
        if has_request_context():
            record.request_id = getattr(g, _REQUEST_ID_KEY, "-")
        else:
            record.request_id = "-"
        return True


def _ensure_request_id():
    if not hasattr(g, _REQUEST_ID_KEY):
        incoming = request.headers.get(_REQUEST_ID_HEADER)
        setattr(g, _REQUEST_ID_KEY, incoming or uuid.uuid4().hex)
    return getattr(g, _REQUEST_ID_KEY)


def _configure_root(cfg, level):
    root = logging.getLogger()
    # handlers already installed (second app in the same process, pytest capture)
    if root.handlers:
        return

    root.setLevel(level)

    text_fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(request_id)s | %(name)s | %(message)s",
        "%Y-%m-%d %H:%M:%S"
    )
    json_fmt = JsonFormatter(cfg.get("APP_NAME"))
    formatter = json_fmt if cfg["LOG_JSON"] else text_fmt

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    console.addFilter(RequestIdFilter())
    root.addHandler(console)

    if cfg.get("LOG_TO_FILE", True):
        log_dir = cfg["LOG_DIR"]
        os.makedirs(log_dir, exist_ok=True)

        def make_handler(filename, lvl=None):
            h = RotatingFileHandler(
                os.path.join(log_dir, filename),
                maxBytes=cfg["LOG_MAX_BYTES"],
                backupCount=cfg["LOG_BACKUP_COUNT"],
                encoding="utf-8"
            )
            h.setLevel(lvl or level)
            h.setFormatter(formatter)
            h.addFilter(RequestIdFilter())
            return h

        root.addHandler(make_handler("app.log"))
        root.addHandler(make_handler("error.log", logging.ERROR))

    # quieter third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").setLevel(logging.INFO)


def init_logger(app):
    cfg = app.config
    level = getattr(logging, cfg["LOG_LEVEL"].upper(), logging.INFO)
    _configure_root(cfg, level)
    app.logger.info("Logger initialized")

    @app.before_request
    def _before():
        g._req_start = time.time()
        _ensure_request_id()
        app.logger.info(f"REQ {request.method} {request.path} from {request.remote_addr}")

    @app.after_request
    def _after(resp):
        duration = (time.time() - getattr(g, "_req_start", time.time())) * 1000
        resp.headers[_REQUEST_ID_HEADER] = getattr(g, _REQUEST_ID_KEY, "-")
        app.logger.info(f"RESP {request.method} {request.path} {resp.status_code} {duration:.1f}ms")
        return resp

    @app.errorhandler(Exception)
    def _err(e):
        from utils.response import json_response
        if isinstance(e, HTTPException):
            code = e.code
            msg = e.description
            error = "http_error"
        else:
            code = 500
            msg = "Internal server error"
            error = "server_error"
            app.logger.exception("UNHANDLED EXCEPTION")
        return json_response(code=code, message=msg, error=error)
