"""Generator configuration.

Options use the same camelCase keys as a codegen ``config:`` block, so a
YAML file such as::

    config:
      namespaceName: MyCompany\\Generated
      listType: Set
      enumValues:
        Color:
          RED: FIRE_ENGINE
      scalars:
        DateTime: \\DateTimeImmutable

can be loaded with ``load_config("codegen.yml")``. Snake_case field names
are accepted too.
"""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .scalars import ScalarTable
from .utils import NAMING_CONVENTIONS

logger = logging.getLogger(__name__)

NamingConvention = Literal["keep", "pascal_case", "upper_case"]


class PhpConfig(BaseModel):
    """Options recognized by the PHP generator."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    namespace_name: str = Field("GraphQLCodeGen", alias="namespaceName")
    class_name: str = Field("Types", alias="className")
    list_type: str = Field("List", alias="listType")
    enum_values: dict[str, dict[str, str | int]] = Field(default_factory=dict, alias="enumValues")
    scalars: dict[str, str] = Field(default_factory=dict)
    naming_convention: NamingConvention = Field("keep", alias="namingConvention")
    # Nest every declaration inside ``public class <className>``
    wrap_types: bool = Field(False, alias="wrapTypes")
    template_dir: str | None = Field(None, alias="templateDir")

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any] | None = None) -> "PhpConfig":
        """Validate a raw options mapping, raising ``ConfigError`` on bad input."""
        try:
            return cls.model_validate(dict(raw or {}))
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    def build_scalars(self) -> ScalarTable:
        """Scalar table with this config's overrides merged over the defaults."""
        return ScalarTable(self.scalars)

    def get_name_converter(self) -> Callable[[str], str]:
        return NAMING_CONVENTIONS[self.naming_convention]


def load_config(path: str | Path) -> PhpConfig:
    """Load a YAML (or JSON) config file.

    A top-level ``config`` key is unwrapped when present, so codegen-style
    files work as-is.
    """
    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    if isinstance(raw.get("config"), dict):
        raw = raw["config"]

    logger.debug("Loaded config from %s: %s", path, sorted(raw))
    return PhpConfig.from_raw(raw)
