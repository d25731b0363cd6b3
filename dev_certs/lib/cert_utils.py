"""Certificate parsing helpers for provisioned PEM files."""

from cryptography import x509

from .models import CertificateSummary

_GENERAL_NAME_PREFIXES: dict[type, str] = {
    x509.DNSName: "DNS",
    x509.IPAddress: "IP",
    x509.RFC822Name: "email",
    x509.UniformResourceIdentifier: "URI",
}


def deserialize_certificate(pem_data: str | bytes) -> x509.Certificate:
    """Deserialize certificate from PEM text or bytes."""
    if isinstance(pem_data, str):
        pem_data = pem_data.encode("utf-8")
    return x509.load_pem_x509_certificate(pem_data)


def get_certificate_serial_hex(cert: x509.Certificate) -> str:
    """Return certificate serial number as hex with colons (e.g., 3A:F2:B1:...)."""
    serial_hex = f"{cert.serial_number:X}"
    if len(serial_hex) % 2 != 0:
        serial_hex = "0" + serial_hex
    return ":".join(serial_hex[i : i + 2] for i in range(0, len(serial_hex), 2))


def get_common_name(cert: x509.Certificate) -> str:
    """Return the subject CN.

    Raises:
        ValueError: If the subject has no string CN
    """
    attributes = cert.subject.get_attributes_for_oid(x509.NameOID.COMMON_NAME)
    if not attributes:
        raise ValueError("certificate subject has no CN")
    cn = attributes[0].value
    if not isinstance(cn, str):
        raise ValueError("CN must be string")
    return cn


def get_subject_alt_names(cert: x509.Certificate) -> list[str]:
    """Return subjectAltName entries in openssl notation, in extension order.

    Returns an empty list when the extension is absent.
    """
    try:
        san = cert.extensions.get_extension_for_class(x509.SubjectAlternativeName).value
    except x509.ExtensionNotFound:
        return []

    names = []
    for general_name in san:
        prefix = _GENERAL_NAME_PREFIXES.get(type(general_name), type(general_name).__name__)
        names.append(f"{prefix}:{general_name.value}")
    return names


def summarize_certificate(pem_data: str | bytes) -> CertificateSummary:
    """Extract the fields shown to the developer after provisioning.

    Args:
        pem_data: PEM-encoded certificate

    Returns:
        CertificateSummary with CN, alt names, validity window and serial
    """
    cert = deserialize_certificate(pem_data)
    return CertificateSummary(
        common_name=get_common_name(cert),
        subject_alt_names=get_subject_alt_names(cert),
        not_valid_before=cert.not_valid_before_utc,
        not_valid_after=cert.not_valid_after_utc,
        serial_number=get_certificate_serial_hex(cert),
    )
