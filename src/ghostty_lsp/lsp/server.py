import logging
from typing import Optional

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from ghostty_lsp.schema import SchemaRepository, default_schema
from ghostty_lsp.version import PACKAGE_NAME, PACKAGE_VERSION

from .features.completion import CompletionGenerator, CompletionService, register_completion
from .utils.document_store import DocumentStore, register_document_sync

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


class GhosttyLSPServer:
    """
    LSP server providing completions for Ghostty configuration files.

    The server offers:
    - Key completions with type, platform and documentation details
    - Value completions for booleans, enums, colors, keybinds, themes and
      example values

    Documents are tracked with full synchronization only. The schema must be
    loaded before the server is constructed; a broken schema prevents the
    server from starting at all.
    """

    def __init__(self, schema: Optional[SchemaRepository] = None, port: Optional[int] = None):
        """
        Initialize the Ghostty LSP server.

        Args:
            schema: Loaded schema repository, defaults to the packaged schema
            port: Port number used in TCP mode

        Raises:
            SchemaLoadError: If no schema is given and the packaged one is invalid
        """
        self.schema = schema if schema is not None else default_schema()
        self.port = port or DEFAULT_PORT

        self.documents = DocumentStore()
        self.completion_service = CompletionService(self.documents, CompletionGenerator(self.schema))
        self.ls = LanguageServer(
            PACKAGE_NAME,
            PACKAGE_VERSION,
            text_document_sync_kind=types.TextDocumentSyncKind.Full,
        )

        self._setup_server()

        logger.info(f"Ghostty LSP server initialized with {len(self.schema)} options")

    def _setup_server(self):
        """Register protocol handlers, document tracking and completion."""
        self._register_handlers()

        register_document_sync(self.ls, self.documents)

        register_completion(self.ls, self.completion_service)
        logger.info("LSP: Completion feature registered")

    def _register_handlers(self):

        @self.ls.feature(types.INITIALIZED)
        def initialized(ls: LanguageServer, params: types.InitializedParams):
            logger.info("LSP: Server initialized successfully")
            ls.window_log_message(
                types.LogMessageParams(type=types.MessageType.Info, message="Ghostty LSP initialised")
            )

        @self.ls.feature(types.SHUTDOWN)
        def shutdown(ls: LanguageServer, params=None):
            logger.info("LSP: Handling shutdown request")
            self._cleanup_resources()
            return None

    def _cleanup_resources(self):
        logger.info("Cleaning up LSP server resources...")
        self.documents.clear()

    def start(self, host: str = "localhost", use_tcp: bool = False):
        """
        Start the LSP server. Blocks until the client disconnects.

        Args:
            host: Host to bind to when using TCP
            use_tcp: Whether to use TCP instead of stdio
        """
        logger.info("Starting Ghostty LSP Server...")

        try:
            if use_tcp:
                logger.info(f"Starting LSP TCP server on {host}:{self.port}...")
                self.ls.start_tcp(host, self.port)
            else:
                logger.info("Starting LSP IO server...")
                self.ls.start_io()
            logger.info("LSP server finished")
        except KeyboardInterrupt:
            logger.info("Received shutdown signal")
        except BrokenPipeError:
            logger.info("Broken pipe - client disconnected")
        except EOFError:
            logger.info("EOF - no more input from client")
        finally:
            self._cleanup_resources()
