import sys

import pytest_lsp
from lsprotocol.types import (
    ClientCapabilities,
    InitializeParams,
)
from pytest_lsp import ClientServerConfig, LanguageClient

SERVER_COMMAND = [sys.executable, "-m", "ghostty_lsp"]


@pytest_lsp.fixture(
    config=ClientServerConfig(server_command=SERVER_COMMAND),
)
async def client(lsp_client: LanguageClient):
    # Setup
    params = InitializeParams(capabilities=ClientCapabilities())
    await lsp_client.initialize_session(params)

    yield

    # Teardown
    await lsp_client.shutdown_session()


@pytest_lsp.fixture(
    config=ClientServerConfig(server_command=SERVER_COMMAND),
)
async def uninitialized_client(lsp_client: LanguageClient):
    yield
