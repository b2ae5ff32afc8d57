"""
Plain-text export of parsed conversation flows.
"""

from typing import List

from .models import ParsedFlow


def format_flow(flow: ParsedFlow) -> str:
    """
    Render a flow as readable text.

    Each step becomes a "Step <n> - <type>" heading followed by one
    "<role>: <text>" line per message. Steps are separated by a blank line.

    Args:
        flow: Parsed conversation flow

    Returns:
        Text rendering, empty string for a flow without steps
    """
    sections: List[str] = []

    for step in flow.steps:
        lines = [f"Step {step.step_number} - {step.step_type}"]
        lines.extend(message.to_standardized_format() for message in step.messages)
        sections.append("\n".join(lines))

    return "\n\n".join(sections)
