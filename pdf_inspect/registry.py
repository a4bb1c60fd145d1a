"""Operation descriptors and the read-only registry that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel

from .document import DocumentAccessor
from .types import ToolResult

Handler = Callable[[DocumentAccessor, Any], ToolResult]


@dataclass(frozen=True)
class ParameterSpec:
    """A single advertised operation parameter."""

    name: str
    type: str
    description: str
    required: bool = False

    def to_schema(self) -> Dict[str, str]:
        return {"type": self.type, "description": self.description}


@dataclass(frozen=True)
class OperationSpec:
    """Name, argument schema and handler for one operation."""

    name: str
    description: str
    parameters: Tuple[ParameterSpec, ...]
    arguments_model: Type[BaseModel]
    handler: Handler

    def input_schema(self) -> Dict[str, Any]:
        """Return the JSON schema advertised for this operation's arguments."""

        return {
            "type": "object",
            "properties": {param.name: param.to_schema() for param in self.parameters},
            "required": [param.name for param in self.parameters if param.required],
        }

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


class OperationRegistry(Mapping[str, OperationSpec]):
    """Immutable mapping of operation names to :class:`OperationSpec`.

    Built once and only read afterwards, so it can be shared between
    concurrent callers without locking.
    """

    def __init__(self, operations: Iterable[OperationSpec]) -> None:
        entries: Dict[str, OperationSpec] = {}
        for operation in operations:
            if operation.name in entries:
                raise ValueError(f"Duplicate operation name: {operation.name}")
            entries[operation.name] = operation
        self._entries: Mapping[str, OperationSpec] = MappingProxyType(entries)

    def __getitem__(self, name: str) -> OperationSpec:
        return self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, name: object) -> Optional[OperationSpec]:
        if not isinstance(name, str):
            return None
        return self._entries.get(name)

    def capabilities(self) -> List[Dict[str, Any]]:
        """Return the capability listing, in registration order."""

        return [operation.describe() for operation in self._entries.values()]


__all__ = ["Handler", "OperationRegistry", "OperationSpec", "ParameterSpec"]
