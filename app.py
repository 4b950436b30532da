"""Dev entry point: ``python app.py`` (use a WSGI server such as gunicorn in production)."""

import os

from src.evidence_uploader.evidence_uploader.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", "3000")))
