"""Test fixtures for dev_certs tests."""

import ipaddress
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from dev_certs.lib.config import ProvisionRequest
from dev_certs.lib.provisioner import CertProvisioner


def _parse_general_name(entry: str) -> x509.GeneralName:
    kind, _, value = entry.partition(":")
    if kind == "IP":
        return x509.IPAddress(ipaddress.ip_address(value))
    return x509.DNSName(value)


def _write_self_signed_pair(args: Sequence[str]) -> int:
    """Honour the openssl req argument template by writing a real key and certificate.

    Uses a 2048-bit key for speed.
    """
    args = list(args)
    key_file = Path(args[args.index("-keyout") + 1])
    cert_file = Path(args[args.index("-out") + 1])
    common_name = args[args.index("-subj") + 1].removeprefix("/CN=")
    san_value = args[args.index("-addext") + 1].removeprefix("subjectAltName = ")
    days = int(args[args.index("-days") + 1])

    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    subject = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    not_before = datetime.now(timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(subject)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(not_before)
        .not_valid_after(not_before + timedelta(days=days))
        .add_extension(
            x509.SubjectAlternativeName(
                [_parse_general_name(entry) for entry in san_value.split(",")]
            ),
            critical=False,
        )
        .sign(key, hashes.SHA256())
    )

    key_file.write_bytes(
        key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    )
    cert_file.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
    return 0


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Path:
    """Return a not-yet-created certificate directory under tmp_path."""
    return tmp_path / "selfSignedCerts"


@pytest.fixture
def fake_openssl() -> MagicMock:
    """Return a mocked openssl runner that writes a real key and certificate."""
    return MagicMock(side_effect=_write_self_signed_pair)


@pytest.fixture
def failing_openssl() -> Callable[[int], MagicMock]:
    """Return a factory for mocked openssl runners exiting with the given status."""

    def _make(exit_code: int) -> MagicMock:
        return MagicMock(return_value=exit_code)

    return _make


@pytest.fixture
def provisioner(fake_openssl: MagicMock) -> CertProvisioner:
    """Return a provisioner on a supported platform backed by the fake runner."""
    return CertProvisioner(runner=fake_openssl, platform_name="darwin")


@pytest.fixture
def provision_request(temp_output_dir: Path) -> ProvisionRequest:
    """Return a request targeting temp_output_dir."""
    return ProvisionRequest(name="Test", output_directory=temp_output_dir, validity_days=30)
