GITHUB_CONFIG = {
    "owner": "acme",
    "repo": "asistencias-evidencias",
    "token": "test-token",
}

UPLOAD_CONFIG = {
    "default_branch": "main",
    "max_size_bytes": 25 * 1024 * 1024,
    "label": "evidencia",
}

CORS_ORIGINS = ["*"]

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
