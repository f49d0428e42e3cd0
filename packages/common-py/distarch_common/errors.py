"""
distarch Error Classes

Every error raised by distarch packages derives from DistArchError so that
callers can catch a single base class. Each error carries a stable ``code``
and can be serialized with ``to_dict()``.

Usage:
    from distarch_common.errors import VersionSpecError

    raise VersionSpecError(">= 1.0, ~2", "invalid META version spec")
"""

from typing import Any, Dict, Optional


class DistArchError(Exception):
    """Base exception for all distarch errors."""

    code = "DISTARCH_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for logs or machine-readable output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


class ValidationError(DistArchError):
    """Input data failed validation (metadata, template variables, options)."""

    code = "VALIDATION_ERROR"


class NamingError(ValidationError):
    """A distribution name normalized down to an empty package name."""

    code = "EMPTY_NAME"

    def __init__(self, raw_name: str):
        self.raw_name = raw_name
        super().__init__(
            f"Dist name '{raw_name}' completely violates packaging standards"
        )


class VersionSpecError(ValidationError):
    """A version requirement clause did not match the recognized grammar."""

    code = "MALFORMED_SPEC"

    def __init__(self, spec: str, detail: str = "invalid META version spec"):
        self.spec = spec
        super().__init__(f"{detail}: {spec}")


# =============================================================================
# TEMPLATE ERRORS
# =============================================================================


class TemplateError(DistArchError):
    """Base class for template rendering failures."""

    code = "TEMPLATE_ERROR"


class MissingVariableError(TemplateError):
    """A placeholder refers to a variable that was not provided (or is None)."""

    code = "MISSING_VARIABLE"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Template variable {name} was not provided")


class UnknownIfVariableError(TemplateError):
    """An IF block tests a variable that was not provided."""

    code = "UNKNOWN_IF_VARIABLE"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown variable name in IF block: {name}")


class TemplateSyntaxError(TemplateError):
    """The template text is malformed."""

    code = "TEMPLATE_SYNTAX"


class UnterminatedBlockError(TemplateSyntaxError):
    """An IF block has no matching END, or an END has no matching IF."""

    code = "UNTERMINATED_BLOCK"

    def __init__(self, message: str, line: int, excerpt: str):
        self.line = line
        self.excerpt = excerpt
        super().__init__(f"{message} (line {line}) starting at:\n{excerpt}...")


class TemplateEngineError(TemplateError):
    """An external template engine failed to process the template."""

    code = "TEMPLATE_ENGINE_ERROR"

    def __init__(self, engine: str, detail: str):
        self.engine = engine
        super().__init__(f"{engine} failed to process template:\n{detail}")
