"""Command line interface for ghostty-lsp."""
