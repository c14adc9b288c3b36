"""
Document Store - full text of every open document, keyed by URI.

The store follows full document synchronization only. On a change
notification the last entry of the batch replaces the text wholesale;
range-based (incremental) edits are not applied, so a client that only
sends incremental diffs leaves the cached text stale.
"""

import logging
from threading import Lock
from typing import Dict, Optional

from lsprotocol import types
from pygls.lsp.server import LanguageServer


logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Lock-guarded mapping from document URI to its current text.

    Every write is a single critical section, so readers observe either
    the previous or the new text of a document, never a mixture.
    """

    def __init__(self):
        self._documents: Dict[str, str] = {}
        self._lock = Lock()

    def upsert(self, uri: str, text: str) -> None:
        """Store `text` as the full content of `uri`, replacing any previous text."""
        with self._lock:
            self._documents[uri] = text

    def remove(self, uri: str) -> None:
        """Forget `uri`. Removing an unknown document is a no-op."""
        with self._lock:
            self._documents.pop(uri, None)

    def snapshot(self, uri: str) -> Optional[str]:
        """Current text of `uri`, or None if the document is not open."""
        with self._lock:
            return self._documents.get(uri)

    def clear(self) -> None:
        with self._lock:
            self._documents.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def __contains__(self, uri: object) -> bool:
        with self._lock:
            return uri in self._documents

    def handle_document_open(self, params: types.DidOpenTextDocumentParams) -> None:
        self.upsert(params.text_document.uri, params.text_document.text)
        logger.debug(f"Opened {params.text_document.uri}")

    def handle_document_change(self, params: types.DidChangeTextDocumentParams) -> None:
        """Apply the last content change of the batch, discarding earlier ones."""
        if not params.content_changes:
            logger.debug(f"Empty change batch for {params.text_document.uri}")
            return

        self.upsert(params.text_document.uri, params.content_changes[-1].text)
        logger.debug(f"Updated {params.text_document.uri} (version {params.text_document.version})")

    def handle_document_close(self, params: types.DidCloseTextDocumentParams) -> None:
        self.remove(params.text_document.uri)
        logger.debug(f"Closed {params.text_document.uri}")


def register_document_sync(server: LanguageServer, store: DocumentStore) -> None:
    """
    Feed didOpen, didChange and didClose notifications into `store`.

    Errors raised by the store propagate to pygls.

    Args:
        server: The language server instance
        store: Store receiving the document text
    """

    @server.feature(types.TEXT_DOCUMENT_DID_OPEN)
    def did_open(ls: LanguageServer, params: types.DidOpenTextDocumentParams):
        store.handle_document_open(params)

    @server.feature(types.TEXT_DOCUMENT_DID_CHANGE)
    def did_change(ls: LanguageServer, params: types.DidChangeTextDocumentParams):
        store.handle_document_change(params)

    @server.feature(types.TEXT_DOCUMENT_DID_CLOSE)
    def did_close(ls: LanguageServer, params: types.DidCloseTextDocumentParams):
        store.handle_document_close(params)

    logger.info("Document sync registered with server")
