"""Pytest configuration and fixtures for schema tests."""
import sys
from pathlib import Path

import pytest

# Add package roots to path for local development
for package_dir in ("schema", "common-py"):
    package_root = str(Path(__file__).parent.parent.parent / package_dir)
    if package_root not in sys.path:
        sys.path.insert(0, package_root)


@pytest.fixture
def meta_v1():
    """A META spec 1.4 document as returned by yaml.safe_load."""
    return {
        "name": "Moose",
        "version": 2.2011,
        "abstract": "A postmodern object system for Perl 5",
        "requires": {
            "perl": "5.008003",
            "Class::Load": "0.09",
            "Data::OptList": "0.107",
            "List::Util": 1.45,
        },
        "build_requires": {"Test::More": "0.88", "Test::Fatal": "0.001"},
        "configure_requires": {"ExtUtils::MakeMaker": 0},
    }


@pytest.fixture
def meta_v2():
    """A META spec 2 document as returned by json.loads."""
    return {
        "name": "Try-Tiny",
        "version": "0.31",
        "abstract": "Minimal try/catch with proper preservation of $@",
        "meta-spec": {"version": 2},
        "prereqs": {
            "runtime": {"requires": {"perl": "5.006", "Carp": "0"}},
            "build": {"requires": {"ExtUtils::MakeMaker": "6.64"}},
            "test": {"requires": {"Test::More": "0.88"}, "recommends": {"CPAN::Meta": "2.12"}},
            "configure": {"requires": {"ExtUtils::MakeMaker": "0"}},
        },
    }
