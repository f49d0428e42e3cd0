"""
distarch Shared Constants

This module defines constants used across distarch packages. It is the single
source of truth for the target ecosystem's naming rules, dependency
classification patterns and default PKGBUILD values.

Usage:
    from distarch_common.constants import PKGNAME_OVERRIDES, PACKAGE_PREFIX

    pkgname = PKGNAME_OVERRIDES.get(dist) or f"{PACKAGE_PREFIX}-{dist.lower()}"
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

DISTARCH_VERSION = "1.25"
"""Generator version written into every PKGBUILD header"""


# =============================================================================
# PACKAGE NAMING
# =============================================================================

PACKAGE_PREFIX = "perl"
"""Prefix prepended (with a hyphen) to every generated package name"""

ROOT_PACKAGE_NAME = "perl"
"""The language runtime package itself; never prefixed"""

PKGNAME_OVERRIDES = {
    "libwww-perl": "perl-libwww",
    "aceperl": "perl-ace",
    "mod_perl": "mod_perl",
    "glade-perl-two": "perl-glade-two",
    "Gnome2-GConf": "gconf-perl",
    "Gtk2-GladeXML": "glade-perl",
    "Glib": "glib-perl",
    "Gnome2": "gnome-perl",
    "Gnome2-VFS": "gnome-vfs-perl",
    "Gnome2-Canvas": "gnomecanvas-perl",
    "Gtk2": "gtk2-perl",
    "Cairo": "cairo-perl",
    "Pango": "pango-perl",
    "Perl-Critic": "perl-critic",
    "Perl-Tidy": "perl-tidy",
    "App-Ack": "ack",
    "TermReadKey": "perl-term-readkey",
}
"""Distribution names whose package names do not follow the generic rule"""


# =============================================================================
# DEPENDENCY CLASSIFICATION
# =============================================================================

TEST_TOOL_PATTERN = r"perl-test-"
"""Packages only needed to run the test suite"""

DOC_TOOL_PACKAGES = ["perl-pod-coverage"]
"""Documentation/coverage tools that only run at build time"""

BUILD_HELPER_PATTERN = r"perl-extutils-"
"""Build helper packages (always build-only)"""

SELF_TEST_DIST_PATTERN = r"^Test-"
"""Distributions that are themselves test tools keep test deps at runtime"""


# =============================================================================
# PKGBUILD DEFAULTS
# =============================================================================

DEFAULT_PACKAGER = "Anonymous"
"""Contributor name used when none is configured"""

DEFAULT_PKGREL = 1
"""Initial package release number"""

CPAN_URL = "http://search.cpan.org"
"""Base URL for distribution home pages and source downloads"""

ARCH_ANY = "'any'"
"""arch=() value for pure-Perl distributions"""

ARCH_XS = "'i686' 'x86_64'"
"""arch=() value for distributions with compiled XS code"""

INSTALLER_TYPES = ["makemaker", "modulebuild"]
"""Supported distribution installer types"""

BAD_ABSTRACTS = ["~", "Module abstract (<= 44 characters) goes here"]
"""META abstracts that are placeholders rather than real descriptions"""


# =============================================================================
# ENVIRONMENT VARIABLE NAMES
# =============================================================================

ENV_PREFIX = "DISTARCH_"
"""Prefix of every environment variable read by distarch"""

LOG_LEVELS = ["debug", "info", "warning", "error"]
"""Valid log level names"""
