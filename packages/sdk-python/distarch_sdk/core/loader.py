"""
META Loader
===========

Parses the text of a distribution's META.yml or META.json into a DistMeta.
Reading the file itself is up to the caller.
"""

import json
from typing import Any, Literal

import yaml

from distarch_common import ValidationError
from distarch_common.logger import get_logger
from distarch_schema import DistMeta

logger = get_logger(__name__)

MetaFormat = Literal["yaml", "json"]


def load_distmeta_string(content: str, format: MetaFormat = "yaml", **overrides: Any) -> DistMeta:
    """
    Parse META content and validate it.

    Args:
        content: Text of META.yml or META.json
        format: "yaml" or "json"
        **overrides: DistMeta fields that META files do not carry
            (installer_type, has_xs, cpan_path, archive, distdir, description)

    Returns:
        Validated DistMeta

    Raises:
        ValidationError: If the content cannot be parsed or is invalid
    """
    if format == "yaml":
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValidationError(f"Invalid META.yml: {e}") from e
    elif format == "json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid META.json: {e}") from e
    else:
        raise ValidationError(f"Unsupported META format: '{format}'")

    meta = DistMeta.from_meta(data, **overrides)
    logger.debug(f"Loaded META for {meta.name} {meta.version}")
    return meta
