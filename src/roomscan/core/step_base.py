"""Base class for the batch analysis steps.

Every step declares typed Input, Output, Config via Pydantic models, so a
step can be run, inspected and tested on its own, and the analyzer can
chain one step's output into the next step's input.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)
ConfigT = TypeVar("ConfigT", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseStep(ABC, Generic[InputT, OutputT, ConfigT]):
    """Abstract base for batch steps.

    Subclasses must:
    1. Define concrete Pydantic models for InputT, OutputT, ConfigT
    2. Set class variables: name, input_type, output_type, config_type
    3. Implement run() and validate_inputs()

    Steps are synchronous and do no I/O; a whole pass runs inside one
    tracking update tick.

    Example:
        class ClassificationStep(BaseStep[ClassificationInput, ClassificationOutput, ClassificationConfig]):
            input_type = ClassificationInput
            output_type = ClassificationOutput
            config_type = ClassificationConfig

            def run(self, inputs: ClassificationInput) -> ClassificationOutput: ...
            def validate_inputs(self, inputs: ClassificationInput) -> bool: ...
    """

    name: ClassVar[str] = ""
    input_type: ClassVar[type[BaseModel]]
    output_type: ClassVar[type[BaseModel]]
    config_type: ClassVar[type[BaseModel]]

    def __init__(self, config: ConfigT | None = None):
        self.config = config if config is not None else self.config_type()

    @abstractmethod
    def run(self, inputs: InputT) -> OutputT:
        """Execute this step. Returns output model."""
        ...

    @abstractmethod
    def validate_inputs(self, inputs: InputT) -> bool:
        """Check that the inputs are usable by this step."""
        ...

    def execute(self, inputs: InputT) -> OutputT:
        """Run with validation, timing and logging."""
        step_name = self.name or self.__class__.__name__

        if not self.validate_inputs(inputs):
            raise ValueError(f"[{step_name}] Input validation failed")

        t0 = time.perf_counter()
        result = self.run(inputs)
        elapsed = time.perf_counter() - t0
        logger.debug(f"[{step_name}] Done in {elapsed * 1000:.2f}ms")
        return result

    @classmethod
    def get_input_schema(cls) -> dict:
        """Return JSON schema for inputs."""
        return cls.input_type.model_json_schema()

    @classmethod
    def get_output_schema(cls) -> dict:
        """Return JSON schema for outputs."""
        return cls.output_type.model_json_schema()

    @classmethod
    def get_config_schema(cls) -> dict:
        """Return JSON schema for config."""
        return cls.config_type.model_json_schema()
