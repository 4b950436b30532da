"""Example: use the service layer directly (without Flask).

Uploads a local file as an "entrada" evidence using the configured settings.
Usage: python examples/example_usage.py <employee-id> <file>
"""

import base64
import importlib
import sys
from pathlib import Path

from config import get_settings_module

from src.evidence_uploader.evidence_uploader.container import build_container


def main():
    employee_id, file_path = sys.argv[1], Path(sys.argv[2])
    settings = importlib.import_module(get_settings_module())
    container = build_container(github_config=settings.GITHUB_CONFIG, upload_config=settings.UPLOAD_CONFIG)
    result = container.submission_service.submit(
        {
            "employeeId": employee_id,
            "kind": "entrada",
            "filename": file_path.name,
            "contentBase64": base64.b64encode(file_path.read_bytes()).decode("ascii"),
        }
    )
    print(result.pr_url)


if __name__ == "__main__":
    main()
