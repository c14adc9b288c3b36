import logging
from typing import Optional

from lsprotocol import types
from pygls.lsp.server import LanguageServer
from pygls.workspace import PositionCodec

from ghostty_lsp.lsp.utils import DocumentStore, classify_line, line_at
from .generator import CompletionGenerator

logger = logging.getLogger(__name__)

TRIGGER_CHARACTERS = ["=", " "]

# LSP default when no encoding was negotiated
DEFAULT_POSITION_CODEC = PositionCodec(types.PositionEncodingKind.Utf16)


def _position_codec(server: Optional[LanguageServer]) -> PositionCodec:
    if server is None:
        return DEFAULT_POSITION_CODEC
    return server.workspace.position_codec


class CompletionService:
    """
    Answers completion requests from the document store and the schema.

    Each request fetches the document text, classifies the cursor line and
    hands the context to the generator. Nothing is kept between requests.
    """

    def __init__(self, documents: DocumentStore, generator: CompletionGenerator):
        self._documents = documents
        self._generator = generator

    def complete(self, server: Optional[LanguageServer], uri: str, position: types.Position) -> list[types.CompletionItem]:
        """
        Compute the completion items for a cursor position.

        An unknown document, or a line past its end, gets every key as a
        best-effort answer.

        Args:
            server: Language server used to report problems to the client, may be None
            uri: Document URI
            position: Zero-based cursor position, in the encoding negotiated with the client

        Returns:
            Ordered completion items
        """
        content = self._documents.snapshot(uri)
        if content is None:
            message = f"No document content for {uri}"
            logger.warning(message)
            if server is not None:
                server.window_log_message(
                    types.LogMessageParams(type=types.MessageType.Warning, message=message)
                )
            return self._generator.key_completions("")

        line = line_at(content, position.line)
        if line is None:
            logger.debug(f"Line {position.line} is out of range for {uri}")
            return self._generator.key_completions("")

        # Client offsets count in the negotiated encoding, the classifier counts code points
        character = _position_codec(server).position_from_client_units(
            [line], types.Position(line=0, character=position.character)
        ).character

        context = classify_line(line, character)
        logger.debug(f"Line context at {position.line}:{position.character}: {context!r}")
        return self._generator.complete(context)


def register_completion(server: LanguageServer, service: CompletionService):
    """
    Register completion functionality with the LSP server.

    Args:
        server: The language server instance
        service: The completion service answering the requests
    """

    completion_options = types.CompletionOptions(
        trigger_characters=TRIGGER_CHARACTERS,
        resolve_provider=False,
    )

    @server.feature(types.TEXT_DOCUMENT_COMPLETION, completion_options)
    def completions(ls: LanguageServer, params: types.CompletionParams) -> Optional[types.CompletionList]:
        """
        Provide completions for the given text document position.

        Args:
            ls: Language server instance
            params: Completion parameters

        Returns:
            CompletionList, or None if the request could not be served
        """
        logger.debug(f"Completion request received for {params.text_document.uri} at position {params.position}")

        try:
            items = service.complete(ls, params.text_document.uri, params.position)
            logger.debug(f"Returning {len(items)} completion items")
            return types.CompletionList(is_incomplete=False, items=items)

        except Exception as e:
            logger.error(f"Error in completion handler: {e}")
            return None
