"""Provisioning request and fixed constants for self-signed dev certificates."""

from dataclasses import dataclass
from pathlib import Path

KEY_FILE_NAME = "selfsigned.key"
CERT_FILE_NAME = "selfsigned.crt"
README_FILE_NAME = "readme.md"
GITIGNORE_FILE_NAME = ".gitignore"
GITIGNORE_CONTENTS = "**"

KEY_SIZE = 4096
DEFAULT_ALT_NAMES = ("DNS:localhost", "IP:127.0.0.1", "IP:0.0.0.0")

# Platforms where the generated certificate and readme instructions are known to work
SUPPORTED_PLATFORMS = frozenset({"darwin"})


@dataclass(frozen=True)
class ProvisionRequest:
    """Options for a single provisioning call.

    Attributes:
        name: Certificate common name, also shown in the readme so certificates
            from different projects can be told apart in the keychain
        output_directory: Where the certificate directory lives, relative paths
            are resolved against the current working directory
        validity_days: How long the certificate is valid
        extra_alt_names: Alt names appended after the defaults, in openssl
            notation such as "DNS:localhost.example.com" or "IP:192.168.0.1"
        project_url: URL of the local server, used in the readme
    """

    name: str = "Self Signed Cert"
    output_directory: Path = Path("selfSignedCerts")
    validity_days: int = 365
    extra_alt_names: tuple[str, ...] = ()
    project_url: str = "https://localhost:8080"

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must not be empty")
        if isinstance(self.validity_days, bool) or not isinstance(self.validity_days, int):
            raise ValueError("validity_days must be an integer")
        if self.validity_days <= 0:
            raise ValueError(f"validity_days must be positive, got {self.validity_days}")
        # Callers may pass str paths and lists of alt names
        object.__setattr__(self, "output_directory", Path(self.output_directory))
        object.__setattr__(self, "extra_alt_names", tuple(self.extra_alt_names))

    def resolved_output_directory(self) -> Path:
        """Return the output directory as an absolute path."""
        return self.output_directory.resolve()
