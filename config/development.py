import os

from config.config import cors_origins_from_env, github_config_from_env, upload_config_from_env

GITHUB_CONFIG = github_config_from_env()
UPLOAD_CONFIG = upload_config_from_env()

CORS_ORIGINS = cors_origins_from_env()

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
