"""
Step 2: Message Extraction

Scans the lines of a step block and collects role-tagged messages.

The scan is a small state machine over a line index:
    NO_ROLE              -> nothing is buffered until the first label
    COLLECTING_CUSTOMER  -> continuation lines belong to the customer turn
    COLLECTING_AGENT     -> continuation lines belong to the agent turn

A label line is "Customer:" or "Agent:" (case-insensitive), alone or with
inline text after the colon. Each label starts a new turn; turns are never
merged, and a label with no text produces no message.

Input: block text
Output: List[Message]
"""

from enum import Enum
from typing import List, Optional, Tuple

from ..constants import ROLE_AGENT, ROLE_CUSTOMER, ROLE_LABELS
from ..models import Message
from .base import BaseFlowStep


class ScanState(Enum):
    NO_ROLE = "no_role"
    COLLECTING_CUSTOMER = "collecting_customer"
    COLLECTING_AGENT = "collecting_agent"


ROLE_TO_STATE = {
    ROLE_CUSTOMER: ScanState.COLLECTING_CUSTOMER,
    ROLE_AGENT: ScanState.COLLECTING_AGENT,
}

STATE_TO_ROLE = {state: role for role, state in ROLE_TO_STATE.items()}


def match_label(line: str) -> Optional[Tuple[str, str]]:
    """
    Check whether a line is a turn label.

    Args:
        line: A single line of text

    Returns:
        (role, inline_text) for a label line, otherwise None
    """
    stripped = line.strip()
    lowered = stripped.lower()

    for label, role in ROLE_LABELS.items():
        if lowered.startswith(label):
            return role, stripped[len(label):].strip()

    return None


class MessageExtractor(BaseFlowStep):
    """Extracts ordered messages from a block of text."""

    def process(self, input_data: str) -> List[Message]:
        return self.extract_messages(input_data)

    def extract_messages(self, block_text: str) -> List[Message]:
        """
        Extract role-tagged messages from a step block.

        Args:
            block_text: Text of one step block, header already removed

        Returns:
            Messages in the order their labels appear
        """
        lines = block_text.split("\n") if block_text else []
        messages: List[Message] = []

        state = ScanState.NO_ROLE
        i = 0

        while i < len(lines):
            label = match_label(lines[i])
            i += 1

            if label is None:
                # Only reached before the first label; later text is consumed below
                continue

            role, inline_text = label
            state = ROLE_TO_STATE[role]
            buffer = f"{inline_text} " if inline_text else ""

            while i < len(lines) and match_label(lines[i]) is None:
                continuation = lines[i].strip()
                if continuation:
                    buffer += f"{continuation} "
                i += 1

            # A label with no text contributes nothing
            if buffer.strip():
                messages.append(Message(role=STATE_TO_ROLE[state], text=buffer.strip()))

        return messages

    def _log_step_result(self, result: List[Message]):
        self.logger.debug(f"Extracted {len(result)} messages")
