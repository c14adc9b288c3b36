"""LSP completion feature for ghostty-lsp."""

from .completion import CompletionService, register_completion
from .generator import BUILTIN_THEMES, CompletionGenerator

__all__ = [
    "BUILTIN_THEMES",
    "CompletionGenerator",
    "CompletionService",
    "register_completion",
]
