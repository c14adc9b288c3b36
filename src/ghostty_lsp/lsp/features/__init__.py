"""LSP features for ghostty-lsp."""

from .completion import CompletionGenerator, CompletionService, register_completion

__all__ = [
    "CompletionGenerator",
    "CompletionService",
    "register_completion",
]
