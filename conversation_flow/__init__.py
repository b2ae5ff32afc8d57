"""
Conversation Flow

Parses semi-structured customer/agent scripts into ordered conversation steps.
"""

from .config import ParserConfig, load_config
from .constants import PRESERVED_TYPES, STEP_DELIMITER, STRUCTURAL_TYPES
from .formatting import format_flow
from .models import ConversationStep, FlowFormatError, Message, ParsedFlow, StepBlock
from .pipeline import (
    ConversationFlowParser,
    parse_conversation_flow,
    parse_conversation_flow_with_types,
)

__all__ = [
    "ConversationFlowParser",
    "parse_conversation_flow",
    "parse_conversation_flow_with_types",
    "format_flow",
    "ParserConfig",
    "load_config",
    "Message",
    "ConversationStep",
    "ParsedFlow",
    "StepBlock",
    "FlowFormatError",
    "STEP_DELIMITER",
    "STRUCTURAL_TYPES",
    "PRESERVED_TYPES",
]
