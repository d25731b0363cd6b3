"""Host platform capability check."""

import sys
from enum import Enum

from .config import SUPPORTED_PLATFORMS


class PlatformSupport(Enum):
    SUPPORTED = "supported"
    UNSUPPORTED = "unsupported"


def check_platform_support(platform_name: str | None = None) -> PlatformSupport:
    """Return whether self-signed certificates can be created on this platform.

    Args:
        platform_name: Platform identifier in sys.platform form, defaults to the host
    """
    if platform_name is None:
        platform_name = sys.platform
    if platform_name in SUPPORTED_PLATFORMS:
        return PlatformSupport.SUPPORTED
    return PlatformSupport.UNSUPPORTED
