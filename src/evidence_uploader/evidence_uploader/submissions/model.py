from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Optional

from ..core.constants import METADATA_VERSION
from ..core.enums import EvidenceKind


@dataclass(frozen=True)
class EvidenceSubmission:
    """A validated, normalized evidence upload."""

    employee_id: str
    kind: EvidenceKind
    notes: str
    filename: str
    content: bytes


@dataclass(frozen=True)
class SubmissionStamp:
    """Single clock reading shared by the branch, paths, messages and metadata."""

    date: str
    time: str


@dataclass(frozen=True)
class BranchDescriptor:
    name: str
    base_commit: str
    base_branch: str


@dataclass(frozen=True)
class CommitRecord:
    path: str
    message: str
    content: bytes
    sha: Optional[str] = None


@dataclass(frozen=True)
class MetadataRecord:
    """Durable, versioned mirror of a submission stored next to the evidence."""

    employee_id: str
    employee_name: str
    kind: EvidenceKind
    notes: str
    date: str
    time: str
    filename: str
    version: int = METADATA_VERSION

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "kind": self.kind.value,
            "notes": self.notes,
            "date": self.date,
            "time": self.time,
            "filename": self.filename,
            "version": self.version,
        }

    def to_json_bytes(self) -> bytes:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False).encode("utf-8")


@dataclass(frozen=True)
class ChangeSet:
    branch: BranchDescriptor
    evidence: CommitRecord
    metadata: CommitRecord


@dataclass(frozen=True)
class ReviewRequest:
    title: str
    body: str
    head_branch: str
    base_branch: str
    number: int
    url: str


@dataclass(frozen=True)
class SubmissionResult:
    """What the upload endpoint reports back to the caller."""

    branch: str
    pr_number: int
    pr_url: str
