"""
Completion candidates for Ghostty config files.

Key completions come from the option keys of the schema; value completions
depend on the option variant of the key being assigned. All filtering is a
case-insensitive substring match, and an empty partial matches everything.
"""

import logging
from typing import Iterable, List, Optional

from lsprotocol import types

from ghostty_lsp.lsp.utils.line_context import (
    CommentContext,
    KeyContext,
    LineContext,
    ValueContext,
)
from ghostty_lsp.schema import (
    BooleanOption,
    ColorOption,
    EnumOption,
    GenericOption,
    KeybindOption,
    Option,
    SchemaRepository,
    ThemeOption,
)


logger = logging.getLogger(__name__)

BOOLEAN_VALUES = ("true", "false")

BUILTIN_THEMES = (
    "auto",
    "Catppuccin Mocha",
    "Catppuccin Macchiato",
    "Catppuccin Frappe",
    "Catppuccin Latte",
    "Dracula",
    "Gruvbox Dark",
    "Gruvbox Light",
    "Nord",
    "One Dark",
    "Solarized Dark",
    "Solarized Light",
    "Tokyo Night",
    "Tokyo Night Storm",
    "Tomorrow Night",
)

MAX_DOC_EXAMPLES = 3

# '~' sorts after every character allowed in option keys.
DEPRECATED_SORT_PREFIX = "~"

HEX_COLOR_LABEL = "#RRGGBB"
THEME_PAIR_LABEL = "light:...,dark:..."
THEME_PAIR_SNIPPET = "light:${1:Catppuccin Latte},dark:${2:Catppuccin Mocha}"


def _matches(candidate: str, partial: str) -> bool:
    """Case-insensitive substring match; `partial` must already be lower-cased."""
    return not partial or partial in candidate.lower()


def _simple_item(
    label: str,
    kind: types.CompletionItemKind,
    detail: Optional[str] = None,
) -> types.CompletionItem:
    return types.CompletionItem(label=label, kind=kind, detail=detail)


class CompletionGenerator:
    """
    Produces completion items for a classified line.

    The generator holds no per-request state; every call builds a fresh list.
    """

    def __init__(self, schema: SchemaRepository):
        self._schema = schema

    def complete(self, context: LineContext) -> List[types.CompletionItem]:
        """
        Dispatch on the line context.

        Args:
            context: Classification of the cursor position

        Returns:
            Ordered completion items, possibly empty
        """
        if isinstance(context, CommentContext):
            return []
        if isinstance(context, KeyContext):
            return self.key_completions(context.partial)
        if isinstance(context, ValueContext):
            return self.value_completions(context.key, context.partial)

        logger.warning(f"Unknown line context: {context!r}")
        return []

    # Keys

    def key_completions(self, partial: str) -> List[types.CompletionItem]:
        """
        Complete option keys containing `partial`.

        Non-deprecated keys come first in key order, deprecated keys last.
        """
        partial_lower = partial.lower()
        items = []
        deprecated_items = []

        for key, option in self._schema.options():
            if not _matches(key, partial_lower):
                continue

            item = types.CompletionItem(
                label=key,
                kind=types.CompletionItemKind.Property,
                detail=self.format_type_detail(option),
                documentation=types.MarkupContent(
                    kind=types.MarkupKind.Markdown,
                    value=self.format_key_documentation(option),
                ),
                insert_text=f"{key} = ",
                insert_text_format=types.InsertTextFormat.PlainText,
            )

            if option.deprecated:
                item.tags = [types.CompletionItemTag.Deprecated]
                item.sort_text = f"{DEPRECATED_SORT_PREFIX}{key}"
                deprecated_items.append(item)
            else:
                items.append(item)

        return items + deprecated_items

    @staticmethod
    def format_type_detail(option: Option) -> str:
        """Detail line such as `string | repeatable | [macos, linux]`."""
        parts = [option.type_name]
        if option.repeatable:
            parts.append("repeatable")
        if option.platforms:
            parts.append(f"[{', '.join(option.platforms)}]")
        return " | ".join(parts)

    @staticmethod
    def format_key_documentation(option: Option) -> str:
        """Markdown documentation: description, examples and valid values."""
        doc = option.description

        if option.examples:
            doc += "\n\n**Examples:**\n"
            for example in option.examples[:MAX_DOC_EXAMPLES]:
                doc += f"- `{option.key} = {example}`\n"

        if option.values:
            doc += "\n\n**Valid values:** "
            doc += ", ".join(option.values)

        return doc

    # Values

    def value_completions(self, key: str, partial: str) -> List[types.CompletionItem]:
        """
        Complete the value of `key`.

        Unknown keys are not completable and yield an empty list.
        """
        option = self._schema.get(key)
        if option is None:
            logger.debug(f"No schema entry for key '{key}'")
            return []

        partial_lower = partial.strip().lower()

        if isinstance(option, BooleanOption):
            return self._boolean_completions(partial_lower)
        if isinstance(option, EnumOption):
            return self._enum_completions(option, partial_lower)
        if isinstance(option, ColorOption):
            return self._color_completions(partial_lower)
        if isinstance(option, KeybindOption):
            return self._keybind_completions(partial_lower)
        if isinstance(option, ThemeOption):
            return self._theme_completions(partial_lower)
        if isinstance(option, GenericOption):
            return self._example_completions(option, partial_lower)

        raise TypeError(f"Unsupported option variant: {type(option).__name__}")

    def _boolean_completions(self, partial: str) -> List[types.CompletionItem]:
        return [
            _simple_item(value, types.CompletionItemKind.Value)
            for value in BOOLEAN_VALUES
            if _matches(value, partial)
        ]

    def _enum_completions(self, option: EnumOption, partial: str) -> List[types.CompletionItem]:
        return [
            _simple_item(value, types.CompletionItemKind.EnumMember)
            for value in option.values
            if _matches(value, partial)
        ]

    def _color_completions(self, partial: str) -> List[types.CompletionItem]:
        items = [
            _simple_item(name, types.CompletionItemKind.Color)
            for name in self._schema.types.color.named_values
            if _matches(name, partial)
        ]

        if "#".startswith(partial) or partial.startswith("#"):
            hex_item = _simple_item(HEX_COLOR_LABEL, types.CompletionItemKind.Color, "Hex colour")
            hex_item.insert_text = "#"
            items.append(hex_item)

        return items

    def _keybind_completions(self, partial: str) -> List[types.CompletionItem]:
        """
        Complete keybind triggers and actions.

        Prefixes (`global:`) and modifiers (`ctrl+`) are matched against the
        whole partial. Actions are only offered once an `=` has been typed
        (or nothing at all) and are matched against the text after the last `=`.
        """
        keybind = self._schema.types.keybind
        items = self._labelled_group(
            (f"{prefix}:" for prefix in keybind.prefixes),
            partial,
            types.CompletionItemKind.Keyword,
            "Keybind prefix",
        )
        items += self._labelled_group(
            (f"{modifier}+" for modifier in keybind.modifiers),
            partial,
            types.CompletionItemKind.Keyword,
            "Modifier key",
        )

        if not partial or "=" in partial:
            after_eq = partial.rsplit("=", 1)[-1].strip()
            items += self._labelled_group(
                keybind.actions,
                after_eq,
                types.CompletionItemKind.Function,
                "Keybind action",
            )

        return items

    def _theme_completions(self, partial: str) -> List[types.CompletionItem]:
        items = self._labelled_group(
            BUILTIN_THEMES,
            partial,
            types.CompletionItemKind.Value,
            "Built-in theme",
        )

        if "light:".startswith(partial):
            items.append(
                types.CompletionItem(
                    label=THEME_PAIR_LABEL,
                    kind=types.CompletionItemKind.Snippet,
                    detail="Light/dark theme combination",
                    documentation="Use different themes for light and dark mode",
                    insert_text=THEME_PAIR_SNIPPET,
                    insert_text_format=types.InsertTextFormat.Snippet,
                )
            )

        return items

    def _example_completions(self, option: GenericOption, partial: str) -> List[types.CompletionItem]:
        return self._labelled_group(
            option.examples,
            partial,
            types.CompletionItemKind.Value,
            "Example value",
        )

    @staticmethod
    def _labelled_group(
        labels: Iterable[str],
        partial: str,
        kind: types.CompletionItemKind,
        detail: str,
    ) -> List[types.CompletionItem]:
        return [_simple_item(label, kind, detail) for label in labels if _matches(label, partial)]
