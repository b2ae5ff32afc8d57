"""
Abstract Base Class for Parsing Steps

This module provides the base class that all conversation flow parsing steps
inherit from. It standardizes the interface and provides common functionality
like logging.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..config import ParserConfig


class BaseFlowStep(ABC):
    """Abstract base class for all conversation flow parsing steps."""

    def __init__(self, config: Optional[ParserConfig] = None):
        """
        Initialize the parsing step.

        Args:
            config: Parser configuration shared by all steps
        """
        self.config = config or ParserConfig()
        self.logger = logging.getLogger(self.__class__.__name__)
        self.setup()

    def setup(self):
        """
        Setup method called after initialization.
        Override this method to perform step-specific initialization.
        """
        # Default implementation - no setup required

    @abstractmethod
    def process(self, input_data: Any) -> Any:
        """
        Main processing method that each step must implement.

        Args:
            input_data: The input data for this step

        Returns:
            The processed output data
        """
        pass

    def execute(self, input_data: Any) -> Any:
        """
        Execute the step with timing and error handling.

        Args:
            input_data: The input data for this step

        Returns:
            The processed output data
        """
        step_name = self.__class__.__name__
        self.logger.debug(f"Starting {step_name}")

        start_time = time.perf_counter()

        try:
            result = self.process(input_data)
        except Exception as e:
            execution_time = time.perf_counter() - start_time
            self.logger.error(
                f"{step_name} failed after {execution_time * 1000:.2f}ms: {str(e)}"
            )
            raise

        execution_time = time.perf_counter() - start_time
        self.logger.debug(
            f"{step_name} completed in {execution_time * 1000:.2f}ms"
        )

        if self.logger.isEnabledFor(logging.DEBUG):
            self._log_step_result(result)

        return result

    def _log_step_result(self, result: Any):
        """
        Log the result of the step processing.
        Override this method to provide step-specific logging.

        Args:
            result: The result to log
        """
        self.logger.debug(f"Step result type: {type(result).__name__}")
