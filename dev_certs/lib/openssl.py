"""openssl argument assembly and process execution."""

import subprocess
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from .config import DEFAULT_ALT_NAMES, KEY_SIZE

CommandRunner = Callable[[Sequence[str]], int]


def build_alt_names(extra_alt_names: Iterable[str] = ()) -> list[str]:
    """Return the default alt names followed by extra_alt_names, order preserved."""
    return [*DEFAULT_ALT_NAMES, *extra_alt_names]


def build_openssl_args(
    name: str,
    validity_days: int,
    alt_names: Sequence[str],
    key_file: Path,
    cert_file: Path,
) -> list[str]:
    """Build the openssl req command line for a self-signed RSA certificate.

    Args:
        name: Common name for the certificate subject
        validity_days: Certificate validity period in days
        alt_names: subjectAltName entries in openssl notation
        key_file: Output path for the unencrypted private key
        cert_file: Output path for the PEM certificate

    Returns:
        Argument list starting with the openssl executable
    """
    return [
        "openssl",
        "req",
        "-newkey",
        f"rsa:{KEY_SIZE}",
        "-x509",
        "-nodes",
        "-keyout",
        str(key_file),
        "-new",
        "-out",
        str(cert_file),
        "-subj",
        f"/CN={name}",
        "-addext",
        "subjectAltName = " + ",".join(alt_names),
        "-sha256",
        "-days",
        str(validity_days),
    ]


def run_command(args: Sequence[str]) -> int:
    """Run a command to completion with inherited stdout/stderr.

    Returns:
        Process exit code

    Raises:
        FileNotFoundError: If the executable is not on PATH
    """
    completed = subprocess.run(list(args), check=False)
    return completed.returncode
