"""Result models for certificate provisioning."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class ProvisionResult:
    """Result from a successful provision call.

    Contains the artifact paths and their PEM text.
    """

    output_directory: Path
    key_file_path: Path
    cert_file_path: Path
    key_contents: str
    cert_contents: str


@dataclass(frozen=True)
class CertificateSummary:
    """Human-readable facts about a provisioned certificate."""

    common_name: str
    subject_alt_names: list[str]
    not_valid_before: datetime
    not_valid_after: datetime
    serial_number: str
