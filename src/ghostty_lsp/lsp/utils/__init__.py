"""LSP utility modules for ghostty-lsp."""

from .document_store import DocumentStore, register_document_sync
from .line_context import (
    CommentContext,
    KeyContext,
    LineContext,
    ValueContext,
    classify_line,
    line_at,
)

__all__ = [
    "DocumentStore",
    "CommentContext",
    "KeyContext",
    "LineContext",
    "ValueContext",
    "classify_line",
    "line_at",
    "register_document_sync",
]
