"""
Data models for the Ghostty configuration schema.

Option metadata is a closed set of frozen record types, one per type tag.
Variants share the common metadata fields and differ in how their values
are completed, so the completion generator can dispatch on the class instead
of on the type tag.
"""

import enum
from typing import Optional, Tuple, Union

import attrs


class OptionType(str, enum.Enum):
    """Type tags understood by the completion engine."""

    BOOLEAN = "boolean"
    ENUM = "enum"
    COLOR = "color"
    KEYBIND = "keybind"
    THEME = "theme"
    GENERIC = "generic"

    @classmethod
    def from_tag(cls, tag: str) -> "OptionType":
        """Map a declared type tag to an OptionType, unknown tags become GENERIC."""
        try:
            return cls(tag)
        except ValueError:
            return cls.GENERIC


def _to_tuple(value) -> Tuple[str, ...]:
    return tuple(value) if value else ()


@attrs.frozen
class BaseOption:
    """
    Fields shared by every option variant.

    Attributes:
        key: Configuration key (e.g. "font-size")
        description: Human-readable description
        repeatable: Whether the key may appear more than once in a config file
        deprecated: Whether the key is deprecated
        values: Declared values; the allowed set for enum options, documentation only otherwise
        examples: Example values, in declaration order
        platforms: Platform tags (e.g. "macos", "linux"), empty when universal
    """

    key: str
    description: str
    repeatable: bool = False
    deprecated: bool = False
    values: Tuple[str, ...] = attrs.field(default=(), converter=_to_tuple)
    examples: Tuple[str, ...] = attrs.field(default=(), converter=_to_tuple)
    platforms: Tuple[str, ...] = attrs.field(default=(), converter=_to_tuple)

    OPTION_TYPE = OptionType.GENERIC

    @property
    def type_name(self) -> str:
        """Type name shown to the user."""
        return self.OPTION_TYPE.value


@attrs.frozen
class BooleanOption(BaseOption):
    OPTION_TYPE = OptionType.BOOLEAN


@attrs.frozen
class EnumOption(BaseOption):
    """Option restricted to a declared list of values."""

    OPTION_TYPE = OptionType.ENUM


@attrs.frozen
class ColorOption(BaseOption):
    OPTION_TYPE = OptionType.COLOR


@attrs.frozen
class KeybindOption(BaseOption):
    OPTION_TYPE = OptionType.KEYBIND


@attrs.frozen
class ThemeOption(BaseOption):
    OPTION_TYPE = OptionType.THEME


@attrs.frozen
class GenericOption(BaseOption):
    """Any option without dedicated completion support (strings, numbers, ...)."""

    declared_type: str = "generic"

    @property
    def type_name(self) -> str:
        return self.declared_type


Option = Union[
    BooleanOption,
    EnumOption,
    ColorOption,
    KeybindOption,
    ThemeOption,
    GenericOption,
]


OPTION_CLASSES = {
    OptionType.BOOLEAN: BooleanOption,
    OptionType.ENUM: EnumOption,
    OptionType.COLOR: ColorOption,
    OptionType.KEYBIND: KeybindOption,
    OptionType.THEME: ThemeOption,
    OptionType.GENERIC: GenericOption,
}


@attrs.frozen
class KeybindDefinition:
    """Building blocks of a keybind value: `prefix:modifier+key=action`."""

    prefixes: Tuple[str, ...] = attrs.field(default=(), converter=_to_tuple)
    modifiers: Tuple[str, ...] = attrs.field(default=(), converter=_to_tuple)
    actions: Tuple[str, ...] = attrs.field(default=(), converter=_to_tuple)


@attrs.frozen
class ColorDefinition:
    named_values: Tuple[str, ...] = attrs.field(default=(), converter=_to_tuple)


@attrs.frozen
class TypeDefinitions:
    """Auxiliary per-type data, consulted only for the matching option type."""

    keybind: KeybindDefinition = attrs.field(factory=KeybindDefinition)
    color: ColorDefinition = attrs.field(factory=ColorDefinition)


def build_option(key: str, data: dict) -> Option:
    """
    Build the option variant for one `options` entry of the schema resource.

    Args:
        key: The option key
        data: The decoded option entry

    Returns:
        The option variant matching the declared type tag
    """
    declared_type = data["type"]
    option_type = OptionType.from_tag(declared_type)
    common = dict(
        key=key,
        description=data.get("description", ""),
        repeatable=bool(data.get("repeatable", False)),
        deprecated=bool(data.get("deprecated", False)),
        examples=data.get("examples"),
        platforms=data.get("platforms"),
        values=data.get("enum"),
    )

    if option_type is OptionType.GENERIC:
        return GenericOption(declared_type=declared_type, **common)
    return OPTION_CLASSES[option_type](**common)


def build_type_definitions(data: Optional[dict]) -> TypeDefinitions:
    """Build TypeDefinitions from the optional `types` section of the resource."""
    if not data:
        return TypeDefinitions()

    keybind_data = data.get("keybind") or {}
    color_data = data.get("color") or {}
    return TypeDefinitions(
        keybind=KeybindDefinition(
            prefixes=keybind_data.get("prefixes"),
            modifiers=keybind_data.get("modifiers"),
            actions=keybind_data.get("actions"),
        ),
        color=ColorDefinition(named_values=color_data.get("namedValues")),
    )
