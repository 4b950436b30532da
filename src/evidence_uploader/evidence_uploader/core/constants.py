"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

DEFAULT_MAX_SIZE_BYTES = 25 * 1024 * 1024
# Lower bound for the raw JSON body cap (base64 inflates files by 4/3).
MIN_REQUEST_BODY_BYTES = 30 * 1024 * 1024

ALLOWED_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "heic", "pdf"})

DIRECTORY_PATH = "docs/employees.json"
EVIDENCE_ROOT = "evidencias"
BRANCH_PREFIX = "evidencia"
METADATA_SUFFIX = "meta.json"
METADATA_VERSION = 1

DEFAULT_BRANCH = "main"
DEFAULT_LABEL = "evidencia"
NOTES_FALLBACK = "N/A"

SEGMENT_MAX_LENGTH = 64
FILENAME_MAX_LENGTH = 120

INTERNAL_ERROR_MESSAGE = "Error interno al procesar la evidencia."
