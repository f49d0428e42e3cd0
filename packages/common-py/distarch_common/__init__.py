"""
distarch Common Package

Shared primitives used across all distarch packages.

This package provides:
- Exception classes for consistent error handling
- Constants for naming rules, classification patterns and PKGBUILD defaults
- Logging helpers
- Environment-driven settings

Usage:
    from distarch_common import NamingError, PKGNAME_OVERRIDES, get_logger

    logger = get_logger(__name__)
"""

# Error classes
from .errors import (
    DistArchError,
    ValidationError,
    NamingError,
    VersionSpecError,
    TemplateError,
    MissingVariableError,
    UnknownIfVariableError,
    TemplateSyntaxError,
    UnterminatedBlockError,
    TemplateEngineError,
)

# Constants
from .constants import (
    DISTARCH_VERSION,
    PACKAGE_PREFIX,
    ROOT_PACKAGE_NAME,
    PKGNAME_OVERRIDES,
    TEST_TOOL_PATTERN,
    DOC_TOOL_PACKAGES,
    BUILD_HELPER_PATTERN,
    SELF_TEST_DIST_PATTERN,
    DEFAULT_PACKAGER,
    DEFAULT_PKGREL,
    CPAN_URL,
    ARCH_ANY,
    ARCH_XS,
    INSTALLER_TYPES,
    BAD_ABSTRACTS,
    LOG_LEVELS,
)

# Logger
from .logger import (
    DistArchLogger,
    get_logger,
    configure_logging,
)

# Settings
from .config import Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DistArchError",
    "ValidationError",
    "NamingError",
    "VersionSpecError",
    "TemplateError",
    "MissingVariableError",
    "UnknownIfVariableError",
    "TemplateSyntaxError",
    "UnterminatedBlockError",
    "TemplateEngineError",
    # Constants
    "DISTARCH_VERSION",
    "PACKAGE_PREFIX",
    "ROOT_PACKAGE_NAME",
    "PKGNAME_OVERRIDES",
    "TEST_TOOL_PATTERN",
    "DOC_TOOL_PACKAGES",
    "BUILD_HELPER_PATTERN",
    "SELF_TEST_DIST_PATTERN",
    "DEFAULT_PACKAGER",
    "DEFAULT_PKGREL",
    "CPAN_URL",
    "ARCH_ANY",
    "ARCH_XS",
    "INSTALLER_TYPES",
    "BAD_ABSTRACTS",
    "LOG_LEVELS",
    # Logger
    "DistArchLogger",
    "get_logger",
    "configure_logging",
    # Settings
    "Settings",
    "get_settings",
]
