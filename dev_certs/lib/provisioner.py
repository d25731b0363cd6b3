"""Provisioner that ensures a self-signed certificate exists in a directory."""

from pathlib import Path

from .config import (
    CERT_FILE_NAME,
    GITIGNORE_CONTENTS,
    GITIGNORE_FILE_NAME,
    KEY_FILE_NAME,
    README_FILE_NAME,
    ProvisionRequest,
)
from .errors import FilesystemError, ToolFailedError
from .filesystem import FileSystem, LocalFileSystem
from .logging_config import LOGGER
from .models import ProvisionResult
from .openssl import CommandRunner, build_alt_names, build_openssl_args, run_command
from .platform_support import PlatformSupport, check_platform_support
from .readme import render_readme


class CertProvisioner:
    """Creates or reuses a directory holding a self-signed key and certificate."""

    def __init__(
        self,
        runner: CommandRunner = run_command,
        filesystem: FileSystem | None = None,
        platform_name: str | None = None,
    ) -> None:
        """Initialize provisioner with its collaborators.

        Args:
            runner: Executes the openssl command line and returns its exit code
            filesystem: Any object implementing FileSystem, defaults to the local disk
            platform_name: Platform identifier in sys.platform form, defaults to the host
        """
        self.runner = runner
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self.platform_name = platform_name

    def provision(self, request: ProvisionRequest | None = None) -> ProvisionResult | None:
        """Return the key and certificate in the output directory, generating them if needed.

        An existing output directory is trusted as-is and only read back. A new
        directory is populated with .gitignore, key, certificate and readme. If
        anything fails the directory is removed so the next call starts over.

        Warning: removal also applies to a pre-existing directory whose key or
        certificate cannot be read, so output_directory must point at a
        directory dedicated to these certificates, never a project root.

        Args:
            request: Provisioning options, defaults to ProvisionRequest()

        Returns:
            ProvisionResult, or None when certificates cannot be created on this
            platform (the new directory is left behind holding only .gitignore)

        Raises:
            ToolFailedError: If openssl is missing or exits non-zero
            FilesystemError: If reading or writing the output directory fails
        """
        if request is None:
            request = ProvisionRequest()

        output_directory = request.resolved_output_directory()
        support = check_platform_support(self.platform_name)

        try:
            return self._provision_output_directory(output_directory, request, support)
        except OSError as e:
            self._remove_output_directory(output_directory)
            raise FilesystemError(f"failed to provision {output_directory}: {e}") from e
        except Exception:
            self._remove_output_directory(output_directory)
            raise

    def _provision_output_directory(
        self,
        output_directory: Path,
        request: ProvisionRequest,
        support: PlatformSupport,
    ) -> ProvisionResult | None:
        key_file = output_directory / KEY_FILE_NAME
        cert_file = output_directory / CERT_FILE_NAME

        if not self.filesystem.is_dir(output_directory):
            self.filesystem.make_dirs(output_directory)
            self.filesystem.write_text(output_directory / GITIGNORE_FILE_NAME, GITIGNORE_CONTENTS)

            if support is PlatformSupport.UNSUPPORTED:
                LOGGER.warning(
                    "Creating self signed certificates is not supported on this platform."
                )
                return None

            LOGGER.info("Generating self signed certificate in %s", output_directory)
            self._run_openssl(request, key_file, cert_file)

            self.filesystem.write_text(
                output_directory / README_FILE_NAME,
                render_readme(request.name, request.project_url),
            )
        else:
            LOGGER.info("Reusing self signed certificate in %s", output_directory)

        return ProvisionResult(
            output_directory=output_directory,
            key_file_path=key_file,
            cert_file_path=cert_file,
            key_contents=self.filesystem.read_text(key_file),
            cert_contents=self.filesystem.read_text(cert_file),
        )

    def _run_openssl(self, request: ProvisionRequest, key_file: Path, cert_file: Path) -> None:
        args = build_openssl_args(
            name=request.name,
            validity_days=request.validity_days,
            alt_names=build_alt_names(request.extra_alt_names),
            key_file=key_file,
            cert_file=cert_file,
        )
        try:
            exit_code = self.runner(args)
        except FileNotFoundError as e:
            raise ToolFailedError(None) from e

        if exit_code != 0:
            raise ToolFailedError(exit_code)

    def _remove_output_directory(self, output_directory: Path) -> None:
        try:
            self.filesystem.remove_tree(output_directory)
        except OSError as e:
            LOGGER.error("Failed to remove %s after provisioning error: %s", output_directory, e)


def get_self_signed_cert(request: ProvisionRequest | None = None) -> ProvisionResult | None:
    """Provision with the host's openssl, disk and platform."""
    return CertProvisioner().provision(request)
