"""Ghostty configuration schema model and loader."""

from .models import (
    BaseOption,
    BooleanOption,
    ColorDefinition,
    ColorOption,
    EnumOption,
    GenericOption,
    KeybindDefinition,
    KeybindOption,
    Option,
    OptionType,
    ThemeOption,
    TypeDefinitions,
)
from .repository import SchemaLoadError, SchemaRepository, default_schema, load_schema

__all__ = [
    "BaseOption",
    "BooleanOption",
    "ColorDefinition",
    "ColorOption",
    "EnumOption",
    "GenericOption",
    "KeybindDefinition",
    "KeybindOption",
    "Option",
    "OptionType",
    "ThemeOption",
    "TypeDefinitions",
    "SchemaLoadError",
    "SchemaRepository",
    "default_schema",
    "load_schema",
]
