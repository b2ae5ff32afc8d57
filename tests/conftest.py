"""
Pytest configuration and fixtures for the conversation flow test suite.
"""

import pytest

from conversation_flow import ConversationFlowParser, ParserConfig


LAPTOP_FLOW = (
    "→ [Entry Point]\n\n"
    "Customer:\nI'm looking for a new laptop.\n\n"
    "Agent:\nI'd be happy to help you find a laptop! What will you be using it for?\n\n"
    "→\n\n"
    "Customer:\nI need it for work and gaming.\n\n"
    "Agent:\nGreat! I'll recommend our high-performance models.\n\n"
    "→ [Exit Point]"
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep local environment settings out of the tests."""
    for name in (
        "CONVERSATION_FLOW_DELIMITER",
        "CONVERSATION_FLOW_ENHANCED",
        "CONVERSATION_FLOW_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def parser():
    return ConversationFlowParser(ParserConfig())


@pytest.fixture
def laptop_flow():
    return LAPTOP_FLOW
