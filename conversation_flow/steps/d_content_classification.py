"""
Step 4: Content-Based Re-classification

Optional pass used by the enhanced parser. Re-derives the type of each
filtered step from its position and the words in its messages:

1. First step          -> "Customer Inquiry"
2. Last step           -> "Completion"
3. price / cost / $    -> "Price Inquiry"
4. buy / purchase      -> "Purchase Decision"
5. need / want / recommend / suggest -> "Requirement Gathering"
6. otherwise the existing type is kept

Steps with a preserved type, and steps without messages, are left alone.

Input: List[ConversationStep]
Output: List[ConversationStep]
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional

from ..constants import CONTENT_RULES, FIRST_STEP_TYPE, LAST_STEP_TYPE, PRESERVED_TYPES
from ..models import ConversationStep
from .base import BaseFlowStep


class ContentClassifier(BaseFlowStep):
    """Keyword-driven step type classifier."""

    def setup(self):
        self.rules: List[Dict[str, Any]] = CONTENT_RULES

    def process(self, input_data: List[ConversationStep]) -> List[ConversationStep]:
        return self.reclassify(input_data)

    def reclassify(self, steps: List[ConversationStep]) -> List[ConversationStep]:
        last_index = len(steps) - 1
        result = []

        for index, step in enumerate(steps):
            if step.step_type in PRESERVED_TYPES or not step.messages:
                result.append(step)
                continue

            step_type = self.classify_step(step, index, last_index)
            if step_type != step.step_type:
                self.logger.debug(
                    f"Step {step.step_number}: {step.step_type} -> {step_type}"
                )
            result.append(replace(step, step_type=step_type))

        return result

    def classify_step(self, step: ConversationStep, index: int, last_index: int) -> str:
        if index == 0:
            return FIRST_STEP_TYPE
        if index == last_index:
            return LAST_STEP_TYPE

        matched = self.match_content(" ".join(m.text for m in step.messages))
        return matched or step.step_type

    def match_content(self, text: str) -> Optional[str]:
        """Return the type of the first rule with a keyword in text."""
        text_lower = text.lower()
        for rule in self.rules:
            if any(keyword in text_lower for keyword in rule["keywords"]):
                return rule["step_type"]
        return None
