from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import INTERNAL_ERROR_MESSAGE
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/upload", methods=["POST"], endpoint="api_upload")
    def api_upload():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        try:
            result = container.submission_service.submit(data)
        except DomainError as e:
            return jsonify({"message": e.message}), 400
        except Exception:
            # Details stay in the server log, never in the response.
            logger.exception("Evidence upload failed")
            return jsonify({"message": INTERNAL_ERROR_MESSAGE}), 500

        return jsonify({"ok": True, "prUrl": result.pr_url}), 201
