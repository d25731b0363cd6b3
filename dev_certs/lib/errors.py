"""Exceptions raised while provisioning certificates."""


class ProvisioningError(Exception):
    """Base class for provisioning failures."""


class ToolFailedError(ProvisioningError):
    """openssl could not be started or exited with a non-zero status."""

    def __init__(self, exit_code: int | None) -> None:
        self.exit_code = exit_code
        if exit_code is None:
            super().__init__("openssl could not be executed")
        else:
            super().__init__(f"openssl exited with status code {exit_code}")


class FilesystemError(ProvisioningError):
    """Reading or writing the output directory failed."""
