"""Pytest configuration and fixtures for SDK tests.

This conftest.py ensures tests work for both developers (source checkout)
and users (pip installed package).
"""
import sys
from pathlib import Path

import pytest

# Add package roots to path for local development
PACKAGES_DIR = Path(__file__).parent.parent.parent
for package_dir in ("sdk-python", "schema", "common-py"):
    package_root = str(PACKAGES_DIR / package_dir)
    if package_root not in sys.path:
        sys.path.insert(0, package_root)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def settings():
    """Packager settings independent of the environment."""
    from distarch_common import Settings

    return Settings(packager="Jane Doe <jane@example.org>", cpan_url="http://search.cpan.org")


@pytest.fixture
def moose_meta():
    """Metadata of a typical pure-perl MakeMaker distribution."""
    from distarch_schema import DistMeta

    return DistMeta(
        name="Moose",
        version="2.2011",
        abstract="A postmodern object system for Perl 5",
        requires={
            "perl": "5.008003",
            "Class::Load": "0.09",
            "Data::OptList": "0.107",
            "Test::More": "0.88",
        },
        build_requires={"Test::More": "0.88", "Test::Fatal": "0.001"},
        configure_requires={"ExtUtils::MakeMaker": "0"},
        cpan_path="authors/id/E/ET/ETHER",
        archive="Moose-2.2011.tar.gz",
    )


@pytest.fixture
def reset_default_renderer(monkeypatch):
    """Forget the lazily created default renderer for one test."""
    from distarch_sdk.templates import renderer

    monkeypatch.setattr(renderer, "_renderer", None)
    return renderer
