"""
Tests for the dependency handling modules.

Tests cover:
- Requirement -> constraint translation
- Dependency merging
- Build-only dependency classification
- Module requirement resolution
"""

import pytest

from distarch_common import VersionSpecError
from distarch_schema import DistMeta
from distarch_sdk.dependencies import (
    BoundOperator,
    Exact,
    Ranges,
    Unconstrained,
    VersionBound,
    classify_deps,
    constraint_for,
    dependency_entries,
    deps_string,
    is_test_dist,
    merge_deps,
    module_to_dist,
    resolve_package_deps,
    translate_constraint_spec,
    translate_dist_deps,
)

# ============================================================================
# Constraint Translation Tests
# ============================================================================


class TestTranslateConstraintSpec:
    """Tests for translate_constraint_spec."""

    def test_bare_version(self):
        assert translate_constraint_spec("1.5") == Exact("1.5")

    def test_bare_version_is_normalized(self):
        assert translate_constraint_spec(" 1.02_01 ") == Exact("1.02")

    def test_not_equal_expansion_order(self):
        result = translate_constraint_spec(">= 0, != 6.04, != 6.05")
        assert isinstance(result, Ranges)
        assert [str(b) for b in result.bounds] == ["<6.04", ">6.04", "<6.05", ">6.05"]

    def test_ranges_keep_clause_order(self):
        result = translate_constraint_spec("< 2.0,>= 1.2")
        assert result.bounds == (
            VersionBound(BoundOperator.LT, "2.0"),
            VersionBound(BoundOperator.GE, "1.2"),
        )

    def test_equality_operator_preserved(self):
        result = translate_constraint_spec("== 1.5")
        assert [str(b) for b in result.bounds] == ["==1.5"]

    def test_no_space_after_operator(self):
        result = translate_constraint_spec(">=1.2, <=v2.0.1")
        assert [str(b) for b in result.bounds] == [">=1.2", "<=2.0.1"]

    def test_zero_lower_bound_only(self):
        assert translate_constraint_spec(">= 0") == Unconstrained()

    def test_zero_lower_bound_dropped(self):
        result = translate_constraint_spec(">= 0, < 3")
        assert [str(b) for b in result.bounds] == ["<3"]

    @pytest.mark.parametrize("spec", ["~1.5", "=> 1.0", "1.5 2.0", ">= 1, ~2", "<>1"])
    def test_malformed_spec(self, spec):
        with pytest.raises(VersionSpecError) as exc_info:
            translate_constraint_spec(spec)
        assert spec in str(exc_info.value)
        assert exc_info.value.spec == spec
        assert exc_info.value.code == "MALFORMED_SPEC"

    def test_clause_without_digits(self):
        with pytest.raises(VersionSpecError, match="no usable version"):
            translate_constraint_spec(">= abc")


class TestDependencyStrings:
    """Tests for rendering constraints as pacman dependency strings."""

    def test_constraint_for_unversioned(self):
        assert constraint_for(None) == Unconstrained()
        assert constraint_for("0") == Unconstrained()
        assert constraint_for("") == Unconstrained()

    def test_constraint_for_version(self):
        assert constraint_for("1.2") == Exact("1.2")

    def test_to_dependencies(self):
        assert Unconstrained().to_dependencies("perl-foo") == ["perl-foo"]
        assert Exact("1.2").to_dependencies("perl-foo") == ["perl-foo>=1.2"]
        assert Exact("").to_dependencies("perl-foo") == ["perl-foo"]

    def test_dependency_entries_sorted(self):
        entries = dependency_entries({"perl-b": ">= 1, != 2", "perl-a": None})
        assert entries == ["perl-a", "perl-b>=1", "perl-b<2", "perl-b>2"]

    def test_deps_string(self):
        assert deps_string({"perl-moose": "2.0", "perl": None}) == "'perl' 'perl-moose>=2.0'"

    def test_deps_string_empty(self):
        assert deps_string({}) == ""

    def test_deps_string_is_deterministic(self):
        deps = {"perl-z": "1", "perl-a": "2", "perl-m": None}
        reordered = dict(reversed(list(deps.items())))
        assert deps_string(deps) == deps_string(reordered)


# ============================================================================
# Merge Tests
# ============================================================================


class TestMergeDeps:
    """Tests for merge_deps."""

    def test_higher_incoming_wins(self):
        assert merge_deps({"a": "1.0"}, {"a": "2.0"})["a"] == "2.0"

    def test_higher_existing_kept(self):
        assert merge_deps({"a": "2.0"}, {"a": "1.0"})["a"] == "2.0"

    def test_tie_keeps_existing(self):
        assert merge_deps({"a": "1.2"}, {"a": "1.2.0"})["a"] == "1.2"

    def test_numeric_comparison(self):
        assert merge_deps({"a": "1.9"}, {"a": "1.10"})["a"] == "1.10"

    def test_inserts_missing(self):
        assert merge_deps({"a": "1.0"}, {"b": None}) == {"a": "1.0", "b": None}

    def test_unconstrained_existing_replaced(self):
        assert merge_deps({"a": None}, {"a": "1.0"})["a"] == "1.0"
        assert merge_deps({"a": "0"}, {"a": "1.0"})["a"] == "1.0"

    def test_unconstrained_incoming_ignored(self):
        assert merge_deps({"a": "1.0"}, {"a": None})["a"] == "1.0"
        assert merge_deps({"a": "1.0"}, {"a": "0"})["a"] == "1.0"

    def test_incomparable_keeps_existing(self):
        assert merge_deps({"a": "abc"}, {"a": "1.0"})["a"] == "abc"
        assert merge_deps({"a": "1.0"}, {"a": "xyz"})["a"] == "1.0"

    def test_range_requirement_is_incomparable(self):
        """Comparison lists are kept rather than compared digit by digit"""
        assert merge_deps({"a": ">= 1.0, != 1.5"}, {"a": "2.0"})["a"] == ">= 1.0, != 1.5"
        assert merge_deps({"a": "2.0"}, {"a": ">= 3, < 4"})["a"] == "2.0"

    def test_merges_in_place(self):
        primary = {"a": "1.0"}
        assert merge_deps(primary, {"b": "2"}) is primary
        assert primary == {"a": "1.0", "b": "2"}

    def test_commutative_outcome(self):
        left = merge_deps({"a": "1.0", "b": "3"}, {"a": "2.0", "b": "2"})
        right = merge_deps({"a": "2.0", "b": "2"}, {"a": "1.0", "b": "3"})
        assert left == right == {"a": "2.0", "b": "3"}


# ============================================================================
# Classification Tests
# ============================================================================


class TestClassifyDeps:
    """Tests for classify_deps."""

    @pytest.fixture
    def deps(self):
        return {
            "perl-moose": None,
            "perl-test-more": "0.88",
            "perl-pod-coverage": None,
            "perl-extutils-makemaker": "6.5",
        }

    def test_relocates_build_only(self, deps):
        build_only = classify_deps(deps)
        assert build_only == {
            "perl-test-more": "0.88",
            "perl-pod-coverage": None,
            "perl-extutils-makemaker": "6.5",
        }
        assert deps == {"perl-moose": None}

    def test_self_test_package_keeps_test_tools(self, deps):
        build_only = classify_deps(deps, is_self_test_package=True)
        assert build_only == {"perl-extutils-makemaker": "6.5"}
        assert "perl-test-more" in deps
        assert "perl-pod-coverage" in deps

    def test_nothing_to_move(self):
        deps = {"perl-moose": "2.0"}
        assert classify_deps(deps) == {}
        assert deps == {"perl-moose": "2.0"}

    def test_is_test_dist(self):
        assert is_test_dist("Test-Deep")
        assert not is_test_dist("Moose")
        assert not is_test_dist("Devel-Test-Thing")


# ============================================================================
# Resolution Tests
# ============================================================================


class TestTranslateDistDeps:
    """Tests for translate_dist_deps."""

    def test_modules_to_packages(self):
        deps = translate_dist_deps({"Class::Load": "0.09", "Try::Tiny": None})
        assert deps == {"perl-class-load": "0.09", "perl-try-tiny": None}

    def test_perl_requirement(self):
        assert translate_dist_deps({"perl": "5.008003"}) == {"perl": "5.8.3"}
        assert translate_dist_deps({"perl": "v5.10.1"}) == {"perl": "5.10.1"}
        assert translate_dist_deps({"perl": "0"}) == {"perl": None}

    def test_core_modules_skipped(self):
        core = {"Carp": "1.50", "Data::OptList": "0.110"}
        deps = translate_dist_deps({"Carp": None, "Data::OptList": "0.107"}, core)
        assert deps == {}

    def test_core_module_with_range_requirement(self):
        deps = translate_dist_deps({"Carp": ">= 1.0, != 1.5"}, {"Carp": "1.50"})
        assert deps == {"perl-carp": ">= 1.0, != 1.5"}

    def test_core_module_too_old(self):
        deps = translate_dist_deps({"Class::Load": "0.09"}, {"Class::Load": "0.01"})
        assert deps == {"perl-class-load": "0.09"}

    def test_unknown_distribution_skipped(self):
        deps = translate_dist_deps({"Foo::Bar": "1"}, dist_of=lambda module: None)
        assert deps == {}

    def test_only_main_module_version_kept(self):
        def dist_of(module):
            return "Moose" if module.startswith("Moose") else module_to_dist(module)

        assert translate_dist_deps({"Moose::Role": "2.0"}, dist_of=dist_of) == {"perl-moose": None}
        deps = translate_dist_deps({"Moose::Role": "2.0", "Moose": "2.1"}, dist_of=dist_of)
        assert deps == {"perl-moose": "2.1"}
        deps = translate_dist_deps({"Moose": "2.1", "Moose::Util": None}, dist_of=dist_of)
        assert deps == {"perl-moose": "2.1"}


class TestResolvePackageDeps:
    """Tests for resolve_package_deps."""

    def test_typical_distribution(self, moose_meta):
        deps = resolve_package_deps(moose_meta)
        assert deps.depends == {
            "perl": "5.8.3",
            "perl-class-load": "0.09",
            "perl-data-optlist": "0.107",
        }
        assert deps.makedepends == {
            "perl-test-more": "0.88",
            "perl-extutils-makemaker": None,
            "perl-test-fatal": "0.001",
        }
        assert deps.depends_string == (
            "'perl>=5.8.3' 'perl-class-load>=0.09' 'perl-data-optlist>=0.107'"
        )
        assert deps.makedepends_string == (
            "'perl-extutils-makemaker' 'perl-test-fatal>=0.001' 'perl-test-more>=0.88'"
        )

    def test_perl_always_required(self):
        deps = resolve_package_deps(DistMeta(name="Foo", version="1"))
        assert deps.depends == {"perl": None}
        assert deps.makedepends == {}

    def test_build_requirement_removed_from_runtime(self):
        meta = DistMeta(
            name="Foo",
            version="1",
            requires={"Foo::Bar": "1.0"},
            build_requires={"Foo::Bar": "1.0"},
        )
        deps = resolve_package_deps(meta)
        assert deps.depends == {"perl": None}
        assert deps.makedepends == {"perl-foo-bar": "1.0"}

    def test_self_test_distribution(self):
        meta = DistMeta(name="Test-Deep", version="1.1", requires={"Test::More": "0.88"})
        deps = resolve_package_deps(meta)
        assert deps.depends == {"perl-test-more": "0.88"}
        assert deps.makedepends == {}

    def test_xs_library_dependencies(self):
        meta = DistMeta(name="XML-LibXML", version="2.0", has_xs=True)
        deps = resolve_package_deps(meta, xs_deps={"libxml2": "2.9.10"})
        assert deps.depends == {"libxml2": "2.9.10", "perl": None}

    def test_makedepends_keep_tightest(self):
        meta = DistMeta(
            name="Foo",
            version="1",
            build_requires={"ExtUtils::MakeMaker": "6.64"},
            configure_requires={"ExtUtils::MakeMaker": "6.30"},
        )
        deps = resolve_package_deps(meta)
        assert deps.makedepends == {"perl-extutils-makemaker": "6.64"}
