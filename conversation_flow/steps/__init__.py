"""
Conversation Flow Parsing Steps

Each step handles one stage of turning a script into a ParsedFlow:

- StepSplitter: splits the script into step blocks
- MessageExtractor: collects role-tagged messages per block
- StepClassifier: assigns step numbers and types, filters empty steps
- ContentClassifier: keyword-based re-classification (enhanced parsing)
"""

from .a_splitting import StepSplitter
from .b_message_extraction import MessageExtractor, ScanState, match_label
from .base import BaseFlowStep
from .c_classification import StepClassifier
from .d_content_classification import ContentClassifier

__all__ = [
    "BaseFlowStep",
    "StepSplitter",
    "MessageExtractor",
    "ScanState",
    "match_label",
    "StepClassifier",
    "ContentClassifier",
]
