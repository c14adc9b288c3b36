"""
LSP server implementation for Ghostty configuration files.

Key Components:
- GhosttyLSPServer: pygls based server wiring document sync and completion
- Feature modules: completion service and candidate generator
- Utility modules: document store with its sync registration, and
  cursor line classification

Usage Example:
    from ghostty_lsp.lsp import GhosttyLSPServer
    from ghostty_lsp.schema import load_schema

    server = GhosttyLSPServer(schema=load_schema())

    # Start server (stdio mode for editor integration)
    server.start()

    # Or start in TCP mode for testing
    server.start(use_tcp=True, host="localhost")
"""

from .server import GhosttyLSPServer

from .features import (
    CompletionGenerator,
    CompletionService,
    register_completion,
)

from .utils import (
    CommentContext,
    DocumentStore,
    KeyContext,
    ValueContext,
    classify_line,
    line_at,
    register_document_sync,
)

__all__ = [
    "GhosttyLSPServer",
    "CompletionGenerator",
    "CompletionService",
    "register_completion",
    "CommentContext",
    "DocumentStore",
    "KeyContext",
    "ValueContext",
    "classify_line",
    "line_at",
    "register_document_sync",
]
