"""Request dispatch: lookup, argument validation, invocation and wrapping."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from .document import DocumentAccessor
from .exceptions import InvalidArgumentError, UnknownOperationError
from .operations import REGISTRY
from .registry import OperationRegistry
from .types import ToolResult

LOGGER = logging.getLogger(__name__)


def describe_validation_error(error: ValidationError) -> str:
    """Summarise a pydantic validation error as ``field: reason`` pairs."""

    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail.get("loc", ()))
        message = detail.get("msg", "invalid value")
        problems.append(f"{location}: {message}" if location else message)
    return "; ".join(problems)


class Dispatcher:
    """Single entry point turning ``(name, arguments)`` into a :class:`ToolResult`."""

    def __init__(
        self,
        registry: OperationRegistry = REGISTRY,
        accessor: Optional[DocumentAccessor] = None,
    ) -> None:
        self.registry = registry
        self.accessor = accessor or DocumentAccessor()

    def list_tools(self) -> List[Dict[str, Any]]:
        return self.registry.capabilities()

    def call(self, name: object, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Dispatch one operation call. Never raises."""

        operation = self.registry.lookup(name)
        if operation is None:
            LOGGER.warning("Rejected call to unknown tool %r", name)
            return ToolResult.error(UnknownOperationError(name).message)

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            return ToolResult.error(
                f"Invalid arguments for {operation.name}: arguments must be an object"
            )

        try:
            parsed = operation.arguments_model.model_validate(dict(arguments))
        except ValidationError as exc:
            summary = describe_validation_error(exc)
            LOGGER.warning("Invalid arguments for %s: %s", operation.name, summary)
            return ToolResult.error(f"Invalid arguments for {operation.name}: {summary}")

        LOGGER.debug("Dispatching %s with %s", operation.name, parsed)
        try:
            result = operation.handler(self.accessor, parsed)
        except InvalidArgumentError as exc:
            LOGGER.warning("%s: %s", operation.name, exc.message)
            return ToolResult.error(exc.message)
        except Exception as exc:
            LOGGER.exception("Unexpected failure in %s", operation.name)
            return ToolResult.error(f"Internal error: {exc}")

        if result.is_error:
            LOGGER.info("%s failed: %s", operation.name, result.content)
        return result


__all__ = ["Dispatcher", "describe_validation_error"]
