"""
Conversation flow data model.

Standardized representation of a parsed conversation flow. The dictionary
form uses the camelCase keys expected by the flow diagram and export code.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import ROLE_AGENT, ROLE_CUSTOMER


class FlowFormatError(ValueError):
    """Raised when a serialized flow does not have the expected shape."""


@dataclass
class StepBlock:
    """One delimiter-separated segment of the raw script."""

    text: str
    explicit_type: Optional[str] = None


@dataclass
class Message:
    """A single role-tagged turn."""

    role: str
    text: str

    def to_standardized_format(self) -> str:
        return f"{self.role}: {self.text}"

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "text": self.text}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Message":
        if not isinstance(data, dict):
            raise FlowFormatError(f"Message must be an object, got {type(data).__name__}")

        role = data.get("role")
        text = data.get("text")
        if role not in (ROLE_CUSTOMER, ROLE_AGENT):
            raise FlowFormatError(f"Unknown message role: {role!r}")
        if not isinstance(text, str):
            raise FlowFormatError("Message text must be a string")

        return cls(role=role, text=text)


@dataclass
class ConversationStep:
    """A numbered, typed step holding its messages in source order."""

    step_number: int
    step_type: str
    messages: List[Message] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stepNumber": self.step_number,
            "stepType": self.step_type,
            "messages": [message.to_dict() for message in self.messages],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConversationStep":
        if not isinstance(data, dict):
            raise FlowFormatError(f"Step must be an object, got {type(data).__name__}")

        step_number = data.get("stepNumber")
        # bool is an int subclass
        if not isinstance(step_number, int) or isinstance(step_number, bool) or step_number < 1:
            raise FlowFormatError(f"Invalid stepNumber: {step_number!r}")

        step_type = data.get("stepType")
        if not isinstance(step_type, str):
            raise FlowFormatError("stepType must be a string")

        messages = data.get("messages", [])
        if not isinstance(messages, list):
            raise FlowFormatError("messages must be a list")

        return cls(
            step_number=step_number,
            step_type=step_type,
            messages=[Message.from_dict(message) for message in messages],
        )


@dataclass
class ParsedFlow:
    """Result of parsing a conversation flow script."""

    steps: List[ConversationStep] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"steps": [step.to_dict() for step in self.steps]}

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsedFlow":
        """
        Build a ParsedFlow from its dictionary form.

        Args:
            data: Dictionary with a "steps" list, as produced by to_dict()

        Returns:
            ParsedFlow instance

        Raises:
            FlowFormatError: If the structure is not a valid flow
        """
        if not isinstance(data, dict):
            raise FlowFormatError(f"Flow must be an object, got {type(data).__name__}")

        steps = data.get("steps")
        if not isinstance(steps, list):
            raise FlowFormatError("Flow must contain a 'steps' list")

        return cls(steps=[ConversationStep.from_dict(step) for step in steps])

    @classmethod
    def from_json(cls, payload: str) -> "ParsedFlow":
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise FlowFormatError(f"Invalid JSON: {e}") from e
        return cls.from_dict(data)
