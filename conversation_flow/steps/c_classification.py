"""
Step 3: Step Classification and Filtering

Assigns a step number and step type to every block, then drops blocks that
carry no messages unless their type is structural.

Step numbers are fixed before filtering, so dropped blocks leave gaps in the
numbering seen downstream.

Input: (List[StepBlock], List[List[Message]])
Output: List[ConversationStep]
"""

from typing import List, Tuple

from ..constants import (
    DEFAULT_STEP_TYPE,
    FIRST_STEP_TYPE,
    LAST_STEP_TYPE,
    STRUCTURAL_TYPES,
)
from ..models import ConversationStep, Message, StepBlock
from .base import BaseFlowStep


class StepClassifier(BaseFlowStep):
    """Rule-based step classifier with the structural filter."""

    def process(
        self, input_data: Tuple[List[StepBlock], List[List[Message]]]
    ) -> List[ConversationStep]:
        blocks, extracted = input_data
        return self.filter_steps(self.classify(blocks, extracted))

    def classify(
        self, blocks: List[StepBlock], extracted: List[List[Message]]
    ) -> List[ConversationStep]:
        """
        Build numbered and typed steps from blocks and their messages.

        Args:
            blocks: Step blocks in source order
            extracted: Messages for each block, same order as blocks

        Returns:
            One ConversationStep per block
        """
        if len(blocks) != len(extracted):
            raise ValueError(
                f"Got {len(blocks)} blocks but {len(extracted)} message lists"
            )

        last_index = len(blocks) - 1
        return [
            ConversationStep(
                step_number=index + 1,
                step_type=self.resolve_step_type(block, index, last_index),
                messages=list(messages),
            )
            for index, (block, messages) in enumerate(zip(blocks, extracted))
        ]

    @staticmethod
    def resolve_step_type(block: StepBlock, index: int, last_index: int) -> str:
        """Explicit header first, then position, then the default type."""
        if block.explicit_type is not None:
            return block.explicit_type
        if index == 0:
            return FIRST_STEP_TYPE
        if index == last_index:
            return LAST_STEP_TYPE
        return DEFAULT_STEP_TYPE

    def filter_steps(self, steps: List[ConversationStep]) -> List[ConversationStep]:
        """Keep steps that have messages or a structural type."""
        kept = []
        for step in steps:
            if step.messages or step.step_type in STRUCTURAL_TYPES:
                kept.append(step)
            else:
                self.logger.debug(
                    f"Dropping step {step.step_number} ({step.step_type}): no messages"
                )
        return kept

    def _log_step_result(self, result: List[ConversationStep]):
        self.logger.debug(
            f"Kept steps: {[step.step_number for step in result]}"
        )
