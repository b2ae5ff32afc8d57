"""
Step 1: Step Splitting

Breaks a raw conversation flow script into ordered step blocks on the step
delimiter and pulls an optional bracketed step type header off each block.

Input: raw script text
Output: List[StepBlock]
"""

import re
from typing import List, Optional, Tuple

from ..models import StepBlock
from .base import BaseFlowStep

# A whole line holding exactly one [...] pair, e.g. "[Entry Point]"
STEP_TYPE_HEADER_RE = re.compile(r"^\[([^\[\]]+)\]$")


class StepSplitter(BaseFlowStep):
    """Splits a script into StepBlocks."""

    def process(self, input_data: Optional[str]) -> List[StepBlock]:
        return self.split(input_data)

    def split(self, raw: Optional[str]) -> List[StepBlock]:
        """
        Split raw text into step blocks.

        Args:
            raw: The conversation flow script

        Returns:
            Step blocks in source order; empty for blank input
        """
        if not raw or not raw.strip():
            return []

        segments = [segment.strip() for segment in raw.split(self.config.delimiter)]

        blocks = []
        for segment in segments:
            # Leading, trailing and doubled delimiters leave empty segments
            if not segment:
                continue

            explicit_type, text = self._extract_header(segment)
            blocks.append(StepBlock(text=text, explicit_type=explicit_type))

        return blocks

    def _extract_header(self, segment: str) -> Tuple[Optional[str], str]:
        """Return (explicit_type, remaining_text) for a trimmed segment."""
        first_line, _, rest = segment.partition("\n")

        match = STEP_TYPE_HEADER_RE.match(first_line.strip())
        if not match:
            return None, segment

        explicit_type = match.group(1).strip()
        if not explicit_type:
            return None, segment

        return explicit_type, rest

    def _log_step_result(self, result: List[StepBlock]):
        self.logger.debug(f"Split into {len(result)} blocks")
        for index, block in enumerate(result):
            self.logger.debug(f"  Block {index}: explicit_type={block.explicit_type!r}")
