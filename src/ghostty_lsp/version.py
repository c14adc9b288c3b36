"""Package name and version, shared by the CLI and the server handshake."""

from importlib.metadata import PackageNotFoundError, version

__all__ = ["PACKAGE_NAME", "PACKAGE_VERSION", "get_package_info"]

PACKAGE_NAME = "ghostty-lsp"

try:
    PACKAGE_VERSION = version(PACKAGE_NAME)
except PackageNotFoundError:
    # Running from a source checkout without installation
    PACKAGE_VERSION = "unknown"


def get_package_info() -> tuple[str, str]:
    """Get the package name and version as a tuple."""
    return PACKAGE_NAME, PACKAGE_VERSION
