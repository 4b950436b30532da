from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import RequestEntityTooLarge

from config import get_settings_module

from .container import Container, build_container
from .core.constants import MIN_REQUEST_BODY_BYTES
from .core.exceptions import ContentTooLargeError
from .health.controller import register as register_health
from .submissions.controller import register as register_submissions

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def request_body_limit(max_size_bytes: int) -> int:
    """JSON body cap.

    Twice the base64 size of the largest accepted file (at least 30 MiB). Files up
    to about twice the limit reach the validator (400); bigger bodies get 413.
    """
    encoded = (int(max_size_bytes) + 2) // 3 * 4
    return max(MIN_REQUEST_BODY_BYTES, 2 * encoded + 1024 * 1024)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        container = build_container(
            github_config=getattr(settings, "GITHUB_CONFIG"),
            upload_config=getattr(settings, "UPLOAD_CONFIG"),
        )

    app.config["MAX_CONTENT_LENGTH"] = request_body_limit(container.max_size_bytes)
    CORS(app, origins=getattr(settings, "CORS_ORIGINS", "*"))

    @app.errorhandler(RequestEntityTooLarge)
    def request_too_large(_e):
        return jsonify({"message": ContentTooLargeError.default_message}), 413

    register_health(app, container)
    register_submissions(app, container)

    logging.getLogger(__name__).info(
        "Evidence uploader ready (settings=%s, max_size_bytes=%s)", settings_module, container.max_size_bytes
    )
    return app
