"""
Parser configuration.

Values are taken from an explicit config dict first, then from environment
variables (a local .env file is loaded), then from the defaults below.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .constants import STEP_DELIMITER

load_dotenv()


@dataclass
class ParserConfig:
    """Configuration for the conversation flow parser."""

    delimiter: str = STEP_DELIMITER
    enhanced: bool = False  # run content-based re-classification
    log_level: str = "INFO"


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def load_config(config: Optional[Dict[str, Any]] = None) -> ParserConfig:
    """
    Load parser configuration from a config dict and environment variables.

    Args:
        config: Optional overrides with keys "delimiter", "enhanced", "log_level"

    Returns:
        ParserConfig instance

    Raises:
        ValueError: If the resolved delimiter is empty
    """
    config = config or {}

    parser_config = ParserConfig(
        delimiter=config.get(
            "delimiter",
            os.getenv("CONVERSATION_FLOW_DELIMITER", STEP_DELIMITER)
        ),
        enhanced=_as_bool(config.get(
            "enhanced",
            os.getenv("CONVERSATION_FLOW_ENHANCED", "false")
        )),
        log_level=str(config.get(
            "log_level",
            os.getenv("CONVERSATION_FLOW_LOG_LEVEL", "INFO")
        )).upper(),
    )

    if not parser_config.delimiter:
        raise ValueError("Step delimiter must not be empty")

    return parser_config
