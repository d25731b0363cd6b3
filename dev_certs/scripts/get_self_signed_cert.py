#!/usr/bin/env python3
"""Ensure a self-signed certificate for local HTTPS development exists."""

import argparse
import sys
from pathlib import Path

from dev_certs.lib.cert_utils import summarize_certificate
from dev_certs.lib.config import ProvisionRequest
from dev_certs.lib.errors import ProvisioningError
from dev_certs.lib.logging_config import LOGGER
from dev_certs.lib.provisioner import get_self_signed_cert


def build_request(args: argparse.Namespace) -> ProvisionRequest:
    """Build a ProvisionRequest, leaving defaults in place for omitted flags."""
    options: dict[str, object] = {}
    if args.name:
        options["name"] = args.name
    if args.out_dir:
        options["output_directory"] = Path(args.out_dir)
    if args.days is not None:
        options["validity_days"] = args.days
    if args.alt_names:
        options["extra_alt_names"] = tuple(args.alt_names)
    if args.project_url:
        options["project_url"] = args.project_url
    return ProvisionRequest(**options)  # type: ignore[arg-type]


def main() -> int:
    """Provision the certificate directory and report where it is.

    Returns:
        Exit code (0 for success or unsupported platform, 1 for failure)
    """
    parser = argparse.ArgumentParser(
        description="Create or reuse a self-signed certificate for local HTTPS"
    )
    parser.add_argument(
        "--name",
        "-n",
        help="Certificate common name, also used in the generated readme "
        "(default: Self Signed Cert)",
    )
    parser.add_argument(
        "--outDir",
        "-o",
        dest="out_dir",
        help="Dedicated directory for the certificate files (default: ./selfSignedCerts). "
        "WARNING: it is deleted recursively if provisioning fails, even when it "
        "already existed, so never point this at a project root",
    )
    parser.add_argument(
        "--days",
        type=int,
        help="Certificate validity in days (default: 365)",
    )
    parser.add_argument(
        "--alt-name",
        dest="alt_names",
        action="append",
        default=[],
        help="Extra subjectAltName entry such as DNS:dev.example.com (repeatable)",
    )
    parser.add_argument(
        "--project-url",
        help="URL of the local server mentioned in the readme (default: https://localhost:8080)",
    )
    args = parser.parse_args()

    try:
        request = build_request(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        result = get_self_signed_cert(request)
        if result is None:
            return 0

        summary = summarize_certificate(result.cert_contents)
        LOGGER.info("Certificate: %s", summary.common_name)
        LOGGER.info("  Alt names: %s", ", ".join(summary.subject_alt_names))
        LOGGER.info("  Valid until: %s", summary.not_valid_after.isoformat())
        LOGGER.info("  Serial: %s", summary.serial_number)

        print(f"Files can be found at {result.output_directory}")
        return 0

    except ProvisioningError as e:
        LOGGER.error("Certificate provisioning failed: %s", e)
        return 1
    except Exception as e:
        LOGGER.error("Unexpected error while provisioning certificate: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
