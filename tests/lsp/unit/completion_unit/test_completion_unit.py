from lsprotocol import types

from ghostty_lsp.lsp.features.completion import BUILTIN_THEMES, CompletionGenerator
from ghostty_lsp.lsp.utils.line_context import CommentContext, KeyContext, ValueContext
from ghostty_lsp.schema import SchemaRepository


def labels(items):
    return [item.label for item in items]


def sort_key(item):
    return item.sort_text or item.label


# Keys


def test_empty_partial_returns_every_key(generator, minimal_schema):
    items = generator.key_completions("")

    assert len(items) == len(minimal_schema)
    assert set(labels(items)) == {key for key, _ in minimal_schema.options()}


def test_partial_filters_keys(generator, minimal_schema):
    all_labels = set(labels(generator.key_completions("")))
    items = generator.key_completions("font")

    assert set(labels(items)) == {"font-size", "font-family", "font-thicken"}
    assert set(labels(items)) <= all_labels


def test_key_filter_is_case_insensitive(generator):
    assert labels(generator.key_completions("FONT-S")) == ["font-size"]


def test_key_filter_matches_substrings(generator):
    assert set(labels(generator.key_completions("theme"))) == {"theme", "window-theme"}


def test_key_item_shape(generator):
    (item,) = generator.key_completions("font-size")

    assert item.kind == types.CompletionItemKind.Property
    assert item.insert_text == "font-size = "
    assert item.insert_text_format == types.InsertTextFormat.PlainText
    assert item.detail == "number"
    assert isinstance(item.documentation, types.MarkupContent)
    assert item.documentation.kind == types.MarkupKind.Markdown
    assert item.tags is None
    assert item.sort_text is None


def test_key_detail_segments(generator):
    details = {item.label: item.detail for item in generator.key_completions("")}

    assert details["font-family"] == "string | repeatable"
    assert details["font-thicken"] == "boolean | [macos]"
    assert details["keybind"] == "keybind | repeatable"
    assert details["window-theme"] == "enum | [macos, linux]"


def test_key_documentation_lists_three_examples(generator):
    (item,) = generator.key_completions("font-size")
    doc = item.documentation.value

    assert doc.startswith("Font size in points.")
    assert "**Examples:**" in doc
    assert "- `font-size = 12`" in doc
    assert "- `font-size = 14`" in doc
    assert "font-size = 16" not in doc


def test_key_documentation_lists_valid_values(generator):
    (item,) = generator.key_completions("cursor-style")

    assert item.documentation.value.endswith("**Valid values:** block, bar, underline, block_hollow")


def test_key_documentation_without_extras(generator):
    (item,) = generator.key_completions("background")

    assert item.documentation.value == "Background color for the window."


def test_valid_values_documented_for_any_option_type():
    schema = SchemaRepository.from_dict(
        {
            "options": {
                "font-feature": {
                    "type": "string",
                    "description": "Font features.",
                    "enum": ["calt", "liga"],
                    "examples": ["-calt"],
                }
            }
        }
    )
    generator = CompletionGenerator(schema)

    (item,) = generator.key_completions("font-feature")
    assert item.detail == "string"
    assert item.documentation.value.endswith("**Valid values:** calt, liga")

    # Values still come from the examples
    assert labels(generator.value_completions("font-feature", "")) == ["-calt"]


def test_deprecated_keys_sort_last(generator):
    items = generator.key_completions("")
    deprecated = [item for item in items if item.tags]
    current = [item for item in items if not item.tags]

    assert set(labels(deprecated)) == {"abc-legacy", "gtk-adwaita"}
    for item in deprecated:
        assert item.tags == [types.CompletionItemTag.Deprecated]
        assert all(sort_key(item) > sort_key(other) for other in current)

    # The list itself is already in that order
    assert items[-len(deprecated):] == deprecated
    ordered = sorted(items, key=sort_key)
    assert labels(ordered[-2:]) == ["abc-legacy", "gtk-adwaita"]


# Values


def test_unknown_key_yields_nothing(generator):
    assert generator.value_completions("no-such-key", "") == []


def test_boolean_values(generator):
    assert labels(generator.value_completions("font-thicken", "")) == ["true", "false"]
    assert labels(generator.value_completions("font-thicken", "tr")) == ["true"]
    assert labels(generator.value_completions("font-thicken", "TR")) == ["true"]
    assert generator.value_completions("font-thicken", "maybe") == []

    item = generator.value_completions("font-thicken", "false")[0]
    assert item.kind == types.CompletionItemKind.Value


def test_enum_values(generator):
    items = generator.value_completions("cursor-style", "b")

    assert labels(items) == ["block", "bar", "block_hollow"]
    assert all(item.kind == types.CompletionItemKind.EnumMember for item in items)


def test_color_named_values(generator):
    items = generator.value_completions("background", "re")

    assert labels(items) == ["red", "dark red"]
    assert all(item.kind == types.CompletionItemKind.Color for item in items)


def test_color_empty_partial_offers_names_and_hex(generator):
    items = generator.value_completions("background", "")

    assert labels(items) == ["black", "red", "blue", "dark red", "#RRGGBB"]


def test_color_hash_offers_single_hex_template(generator):
    for partial in ("#", "#ff", "#1D2021"):
        items = generator.value_completions("background", partial)
        hex_items = [item for item in items if item.insert_text == "#"]

        assert len(hex_items) == 1
        assert hex_items[0].label == "#RRGGBB"
        assert hex_items[0].detail == "Hex colour"


def test_keybind_without_equals_has_no_actions(generator):
    items = generator.value_completions("keybind", "global:ctrl+shift+")

    assert all(item.kind != types.CompletionItemKind.Function for item in items)


def test_keybind_prefixes_and_modifiers(generator):
    items = generator.value_completions("keybind", "al")

    assert labels(items) == ["global:", "all:", "alt+"]
    assert [item.detail for item in items] == ["Keybind prefix", "Keybind prefix", "Modifier key"]
    assert all(item.kind == types.CompletionItemKind.Keyword for item in items)


def test_keybind_actions_after_equals(generator):
    items = generator.value_completions("keybind", "ctrl+a = rel")

    assert labels(items) == ["reload_config"]
    assert items[0].kind == types.CompletionItemKind.Function
    assert items[0].detail == "Keybind action"


def test_keybind_actions_after_last_equals(generator):
    items = generator.value_completions("keybind", "ctrl+a=")

    assert labels(items) == [
        "copy_to_clipboard",
        "paste_from_clipboard",
        "reload_config",
        "new_window",
        "reset",
    ]


def test_keybind_empty_partial_offers_all_groups(generator, minimal_schema):
    keybind = minimal_schema.types.keybind
    items = generator.value_completions("keybind", "")

    assert len(items) == len(keybind.prefixes) + len(keybind.modifiers) + len(keybind.actions)


def test_theme_empty_partial(generator):
    items = generator.value_completions("theme", "")

    assert len(BUILTIN_THEMES) == 15
    assert labels(items) == list(BUILTIN_THEMES) + ["light:...,dark:..."]


def test_theme_filtering(generator):
    items = generator.value_completions("theme", "cat")

    assert labels(items) == [
        "Catppuccin Mocha",
        "Catppuccin Macchiato",
        "Catppuccin Frappe",
        "Catppuccin Latte",
    ]
    assert all(item.detail == "Built-in theme" for item in items)
    assert labels(generator.value_completions("theme", "DRAC")) == ["Dracula"]


def test_theme_light_dark_snippet(generator):
    items = generator.value_completions("theme", "light")

    assert labels(items) == ["Gruvbox Light", "Solarized Light", "light:...,dark:..."]

    snippet = items[-1]
    assert snippet.kind == types.CompletionItemKind.Snippet
    assert snippet.insert_text_format == types.InsertTextFormat.Snippet
    assert snippet.insert_text == "light:${1:Catppuccin Latte},dark:${2:Catppuccin Mocha}"
    assert snippet.documentation == "Use different themes for light and dark mode"


def test_theme_snippet_only_for_light_prefix(generator):
    assert "light:...,dark:..." not in labels(generator.value_completions("theme", "nord"))
    assert "light:...,dark:..." in labels(generator.value_completions("theme", "li"))


def test_generic_examples(generator):
    items = generator.value_completions("font-size", "1")

    assert labels(items) == ["12", "13", "14", "16"]
    assert all(item.detail == "Example value" for item in items)
    assert labels(generator.value_completions("font-size", "13")) == ["13"]


def test_generic_without_examples(generator):
    assert generator.value_completions("font-family", "xyz") == []


# Dispatch


def test_comment_context_yields_nothing(generator):
    assert generator.complete(CommentContext()) == []


def test_key_context_dispatch(generator):
    assert labels(generator.complete(KeyContext("cursor"))) == ["cursor-style"]


def test_value_context_dispatch(generator):
    assert labels(generator.complete(ValueContext(key="font-thicken", partial="fa"))) == ["false"]


def test_lists_are_fresh_per_call(generator):
    first = generator.key_completions("")
    first.clear()

    assert generator.key_completions("") != []
