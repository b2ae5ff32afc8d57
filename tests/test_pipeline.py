"""
End-to-end tests for the conversation flow parser.
"""

import pytest

from conversation_flow import (
    ConversationFlowParser,
    Message,
    ParsedFlow,
    parse_conversation_flow,
    parse_conversation_flow_with_types,
)


class TestParse:
    """Tests for the rule-based parser."""

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank_input(self, parser, text):
        assert parser.parse(text) == ParsedFlow(steps=[])

    def test_single_step_without_delimiter(self, parser):
        flow = parser.parse("Customer:\nHello\n\nAgent:\nHi there")

        assert len(flow.steps) == 1
        step = flow.steps[0]
        assert step.step_number == 1
        assert step.step_type == "Customer Inquiry"
        assert step.messages == [
            Message(role="customer", text="Hello"),
            Message(role="agent", text="Hi there"),
        ]

    def test_empty_label_contributes_nothing(self, parser):
        flow = parser.parse("Customer:\n\nAgent:\nHi")

        assert flow.steps[0].messages == [Message(role="agent", text="Hi")]

    def test_laptop_flow(self, parser, laptop_flow):
        flow = parser.parse(laptop_flow)

        assert [s.step_number for s in flow.steps] == [1, 2, 3]
        assert [s.step_type for s in flow.steps] == [
            "Entry Point",
            "Conversation Step",
            "Exit Point",
        ]
        assert flow.steps[0].messages == [
            Message(role="customer", text="I'm looking for a new laptop."),
            Message(
                role="agent",
                text="I'd be happy to help you find a laptop! What will you be using it for?",
            ),
        ]
        assert flow.steps[1].messages == [
            Message(role="customer", text="I need it for work and gaming."),
            Message(role="agent", text="Great! I'll recommend our high-performance models."),
        ]
        assert flow.steps[2].messages == []

    def test_prose_only_middle_step_is_dropped_leaving_gap(self, parser):
        flow = parser.parse("Customer:\nHi\n→\nJust some notes\n→\nAgent:\nBye")

        assert [s.step_number for s in flow.steps] == [1, 3]
        assert [s.step_type for s in flow.steps] == ["Customer Inquiry", "Completion"]

    def test_empty_last_step_is_dropped(self, parser):
        flow = parser.parse("Customer: Hi → trailing prose")

        assert [s.step_number for s in flow.steps] == [1]

    def test_empty_structural_steps_are_kept(self, parser):
        flow = parser.parse("[Entry Point] → Customer: Hi → [Decision Point] → Agent: Ok → [Exit Point]")

        assert [(s.step_number, s.step_type, len(s.messages)) for s in flow.steps] == [
            (1, "Entry Point", 0),
            (2, "Conversation Step", 1),
            (3, "Decision Point", 0),
            (4, "Conversation Step", 1),
            (5, "Exit Point", 0),
        ]

    def test_step_numbers_strictly_increase(self, parser):
        text = "Customer: a → x → Agent: b → y → [Integration] → z → Customer: c"
        numbers = [s.step_number for s in parser.parse(text).steps]

        assert numbers == sorted(set(numbers))
        assert numbers[0] >= 1
        assert numbers == [1, 3, 5, 7]

    def test_calls_are_independent(self, parser, laptop_flow):
        first = parser.parse(laptop_flow)
        parser.parse("Customer: something else")

        assert parser.parse(laptop_flow) == first

    def test_module_level_helper(self, laptop_flow):
        assert parse_conversation_flow(laptop_flow) == ConversationFlowParser().parse(laptop_flow)


class TestParseWithTypes:
    """Tests for the enhanced parser."""

    def test_laptop_flow(self, parser, laptop_flow):
        flow = parser.parse_with_types(laptop_flow)

        assert [s.step_type for s in flow.steps] == [
            "Entry Point",
            "Requirement Gathering",
            "Exit Point",
        ]

    def test_uses_filtered_positions(self, parser):
        text = "Agent: Welcome → notes only → Customer: How much does it cost? → Agent: Done"
        flow = parser.parse_with_types(text)

        assert [(s.step_number, s.step_type) for s in flow.steps] == [
            (1, "Customer Inquiry"),
            (3, "Price Inquiry"),
            (4, "Completion"),
        ]

    def test_blank_input(self):
        assert parse_conversation_flow_with_types("  ") == ParsedFlow(steps=[])

    def test_run_follows_config(self, laptop_flow):
        parser = ConversationFlowParser.from_config({"enhanced": True})

        assert parser.run(laptop_flow) == parser.parse_with_types(laptop_flow)

    def test_run_defaults_to_rule_based(self, parser, laptop_flow):
        assert parser.run(laptop_flow) == parser.parse(laptop_flow)
