#!/usr/bin/env python3
"""
Conversation Flow Pipeline

Turns a conversation flow script into a ParsedFlow.

Pipeline Steps:
1. Split the script into step blocks on the "→" delimiter
2. Extract role-tagged messages from each block
3. Classify step types and drop empty, non-structural steps
4. (enhanced only) Re-classify steps from their message content

Script format:
    → [Entry Point]

    Customer:
    I'm looking for a new laptop.

    Agent:
    I'd be happy to help!

    → [Exit Point]

Usage:
  # Parse a script and print JSON
  conversation-flow flow.txt

  # Content-based step types, plain text output
  conversation-flow flow.txt --enhanced --format text

  # Read from stdin, write to a file
  cat flow.txt | conversation-flow - --output flow.json

Environment Variables:
- CONVERSATION_FLOW_DELIMITER (default →)
- CONVERSATION_FLOW_ENHANCED (default false)
- CONVERSATION_FLOW_LOG_LEVEL (default INFO)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import ParserConfig, load_config
from .formatting import format_flow
from .models import ParsedFlow
from .steps import ContentClassifier, MessageExtractor, StepClassifier, StepSplitter

logger = logging.getLogger(__name__)


class ConversationFlowParser:
    """Runs the parsing steps in order. Holds no per-call state."""

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

        self.splitter = StepSplitter(self.config)
        self.extractor = MessageExtractor(self.config)
        self.classifier = StepClassifier(self.config)
        self.content_classifier = ContentClassifier(self.config)

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "ConversationFlowParser":
        return cls(load_config(config))

    def parse(self, text: Optional[str]) -> ParsedFlow:
        """
        Parse a conversation flow script with rule-based step types.

        Args:
            text: Conversation flow script

        Returns:
            ParsedFlow; empty for blank input
        """
        blocks = self.splitter.execute(text)
        if not blocks:
            return ParsedFlow(steps=[])

        extracted = [self.extractor.execute(block.text) for block in blocks]
        steps = self.classifier.execute((blocks, extracted))

        logger.debug(f"Parsed {len(blocks)} blocks into {len(steps)} steps")
        return ParsedFlow(steps=steps)

    def parse_with_types(self, text: Optional[str]) -> ParsedFlow:
        """Parse, then re-classify step types from message content."""
        flow = self.parse(text)
        if not flow.steps:
            return flow
        return ParsedFlow(steps=self.content_classifier.execute(flow.steps))

    def run(self, text: Optional[str]) -> ParsedFlow:
        """Parse using the variant selected by the configuration."""
        if self.config.enhanced:
            return self.parse_with_types(text)
        return self.parse(text)


def parse_conversation_flow(text: Optional[str]) -> ParsedFlow:
    """Parse a conversation flow script with default settings."""
    return ConversationFlowParser().parse(text)


def parse_conversation_flow_with_types(text: Optional[str]) -> ParsedFlow:
    """Parse a conversation flow script and detect step types from content."""
    return ConversationFlowParser().parse_with_types(text)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conversation-flow",
        description="Parse a conversation flow script into structured steps",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Script file to parse (default: stdin)",
    )
    parser.add_argument(
        "--enhanced",
        action="store_true",
        default=None,
        help="Detect step types from message content",
    )
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument("--output", help="Write output to this file instead of stdout")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point."""
    args = build_arg_parser().parse_args(argv)

    overrides: Dict[str, Any] = {}
    if args.enhanced is not None:
        overrides["enhanced"] = args.enhanced
    if args.log_level:
        overrides["log_level"] = args.log_level

    try:
        config = load_config(overrides)
    except ValueError as e:
        logger.error(f"❌ Invalid configuration: {e}")
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            text = Path(args.input).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"❌ Could not read {args.input}: {e}")
        return 1

    flow = ConversationFlowParser(config).run(text)
    logger.info(f"✅ Parsed {len(flow.steps)} steps from {args.input}")

    if args.format == "text":
        rendered = format_flow(flow)
    else:
        rendered = flow.to_json(indent=2)

    if args.output:
        try:
            Path(args.output).write_text(rendered + "\n", encoding="utf-8")
        except OSError as e:
            logger.error(f"❌ Could not write {args.output}: {e}")
            return 1
        logger.info(f"📄 Output saved to {args.output}")
    else:
        print(rendered)

    return 0


if __name__ == "__main__":
    sys.exit(main())
