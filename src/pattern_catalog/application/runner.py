"""Example runner - executes catalog entries and captures their output."""
from typing import Any, List, Mapping, Optional

from pattern_catalog.domain.catalog.value_objects import ExampleDescriptor, ExampleOutput
from pattern_catalog.domain.core.exceptions import ExecutionError, ValidationError
from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConsoleCapture:
    """Stand-in for a console: collects printed lines instead of writing them."""

    def __init__(self):
        self.lines: List[str] = []

    def print(self, *values: Any, sep: str = " ") -> None:
        self.lines.extend(sep.join(str(value) for value in values).split("\n"))

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class ExampleRunner:
    """Runs pattern examples without touching the real console."""

    def __init__(self, catalog=None):
        self._catalog = catalog

    def run(self, descriptor: ExampleDescriptor,
            input: Optional[Mapping[str, Any]] = None) -> ExampleOutput:
        """
        Run an example and capture what it prints.

        Args:
            descriptor: The example to run
            input: Optional options forwarded to the example

        Returns:
            ExampleOutput with the captured text and the example's return value

        Raises:
            ExecutionError: If the example logic raises
        """
        if input is not None and not isinstance(input, Mapping):
            raise ValidationError(
                f"Example input must be a mapping, got {type(input).__name__}"
            )

        console = ConsoleCapture()
        logger.debug(f"Running example: {descriptor.name}")
        try:
            value = descriptor.run(console, dict(input) if input else {})
        except Exception as e:
            logger.error(f"Example {descriptor.name} failed: {e}")
            raise ExecutionError(descriptor.name, str(e)) from e

        return ExampleOutput(text=console.text, value=value)

    def run_by_name(self, name: str,
                    input: Optional[Mapping[str, Any]] = None) -> ExampleOutput:
        """
        Resolve ``name`` through the catalog and run it.

        Raises:
            PatternNotFoundError: If the name is not registered
            ExecutionError: If the example logic raises
        """
        if self._catalog is None:
            raise ValidationError("ExampleRunner has no catalog to resolve names")
        return self.run(self._catalog.lookup(name), input)
