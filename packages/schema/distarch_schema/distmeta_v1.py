"""
distarch Distribution Metadata Schema v1

Pydantic models describing the CPAN distribution metadata that distarch turns
into a PKGBUILD.

Design Principles:
- Pure validation: receives dicts, validates structure, returns typed objects
- No file I/O: reading META files is the SDK loader's responsibility
- Accepts both META spec 1.4 (``requires``/``build_requires``) and META spec 2
  (``prereqs``) layouts through ``DistMeta.from_meta``

Usage:
    from distarch_schema import DistMeta

    meta = DistMeta.from_meta(yaml.safe_load(meta_yml_text))
"""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import Self

from distarch_common import BAD_ABSTRACTS, INSTALLER_TYPES, ValidationError

Requirements = Dict[str, Optional[str]]

# Installer class names used by CPANPLUS, accepted as aliases
INSTALLER_ALIASES = {
    "CPANPLUS::Dist::MM": "makemaker",
    "CPANPLUS::Dist::Build": "modulebuild",
    "ExtUtils::MakeMaker": "makemaker",
    "Module::Build": "modulebuild",
}


def _coerce_requirements(value: Any, field_name: str) -> Requirements:
    """Validate a module -> version mapping, turning numeric versions into strings."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError(
            f"{field_name} must be a mapping of module name to version, "
            f"got {type(value).__name__}"
        )

    result: Requirements = {}
    for module, version in value.items():
        if not isinstance(module, str) or not module.strip():
            raise ValidationError(f"{field_name} contains an empty module name")
        if version is None:
            result[module] = None
        elif isinstance(version, bool):
            raise ValidationError(f"{field_name}: version of '{module}' must not be a boolean")
        elif isinstance(version, (str, int, float)):
            # YAML turns 0.89 into a float; keep its textual form
            result[module] = str(version).strip()
        else:
            raise ValidationError(
                f"{field_name}: version of '{module}' must be a string, "
                f"got {type(version).__name__}"
            )
    return result


class DistMeta(BaseModel):
    """
    Metadata of one CPAN distribution.

    ``requires``, ``build_requires`` and ``configure_requires`` map module
    names to raw CPAN version requirements (``"0.89"``, ``">= 1.2, != 1.5"``)
    or ``None`` when any version will do.
    """

    name: str
    version: str
    abstract: Optional[str] = None
    description: Optional[str] = None
    requires: Requirements = {}
    build_requires: Requirements = {}
    configure_requires: Requirements = {}
    installer_type: Literal["makemaker", "modulebuild"] = "makemaker"
    has_xs: bool = False
    cpan_path: Optional[str] = None
    archive: Optional[str] = None
    distdir: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        """Distribution names cannot be blank"""
        if not isinstance(v, str) or not v.strip():
            raise ValidationError("Distribution name cannot be empty")
        return v.strip()

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, v: Any) -> str:
        """Versions may arrive as YAML numbers"""
        if v is None or isinstance(v, bool):
            raise ValidationError("Distribution version is required")
        if isinstance(v, (int, float)):
            return str(v)
        if isinstance(v, str) and v.strip():
            return v.strip()
        raise ValidationError(f"Invalid distribution version: {v!r}")

    @field_validator("requires", "build_requires", "configure_requires", mode="before")
    @classmethod
    def validate_requirements(cls, v: Any, info) -> Requirements:
        return _coerce_requirements(v, info.field_name)

    @field_validator("installer_type", mode="before")
    @classmethod
    def validate_installer_type(cls, v: Any) -> str:
        """Accept installer class names as aliases"""
        if isinstance(v, str):
            v = INSTALLER_ALIASES.get(v, v.lower())
        if v not in INSTALLER_TYPES:
            raise ValidationError(
                f"unknown Perl module installer type: '{v}'. "
                f"Supported types: {', '.join(INSTALLER_TYPES)}"
            )
        return v

    @property
    def pkgdesc(self) -> str:
        """Short description: the abstract unless it is boilerplate, else the description."""
        if self.abstract and self.abstract.strip() not in BAD_ABSTRACTS:
            return self.abstract.strip()
        if self.description:
            return self.description.strip()
        return ""

    @property
    def build_dir(self) -> str:
        """Directory the source archive extracts into."""
        return self.distdir or f"{self.name}-{self.version}"

    @classmethod
    def from_meta(cls, data: Dict[str, Any], **overrides: Any) -> Self:
        """
        Build a DistMeta from a parsed META.yml / META.json document.

        META spec 2 ``prereqs`` are flattened: the runtime phase becomes
        ``requires``, build and test phases become ``build_requires`` and the
        configure phase becomes ``configure_requires``. Only the ``requires``
        relation is used.

        Args:
            data: Parsed META document
            **overrides: Fields not present in META files (installer_type,
                has_xs, cpan_path, archive, distdir, description)
        """
        if not isinstance(data, dict):
            raise ValidationError(
                f"META document must be a mapping, got {type(data).__name__}"
            )

        fields: Dict[str, Any] = {
            "name": data.get("name"),
            "version": data.get("version"),
            "abstract": data.get("abstract"),
            "description": data.get("description"),
        }

        prereqs = data.get("prereqs")
        if prereqs is not None:
            if not isinstance(prereqs, dict):
                raise ValidationError("prereqs must be a mapping of phases")

            def phase(name: str) -> Requirements:
                section = prereqs.get(name) or {}
                return _coerce_requirements(section.get("requires"), f"prereqs.{name}")

            fields["requires"] = phase("runtime")
            build = phase("build")
            for module, version in phase("test").items():
                build.setdefault(module, version)
            fields["build_requires"] = build
            fields["configure_requires"] = phase("configure")
        else:
            fields["requires"] = data.get("requires")
            fields["build_requires"] = data.get("build_requires")
            fields["configure_requires"] = data.get("configure_requires")

        fields.update(overrides)
        return cls.model_validate(fields)
