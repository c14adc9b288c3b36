"""Language server offering completions for Ghostty terminal configuration files."""

from .version import PACKAGE_NAME, PACKAGE_VERSION

__version__ = PACKAGE_VERSION

__all__ = ["PACKAGE_NAME", "PACKAGE_VERSION", "__version__"]
