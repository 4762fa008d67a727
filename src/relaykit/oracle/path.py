"""
Path expressions for picking one value out of a JSON document.

A path is a chain of segments applied left to right:

- ``.name``        property access (``\\w+`` characters)
- ``[3]``          array index
- ``["name"]``     quoted property access (single or double quotes)

Example: ``.result[0]["ProposeGasPrice"]``.

A malformed path is a configuration error and raises MalformedPathError.
A well-formed path that does not match the data yields ``ABSENT``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

from relaykit.errors import MalformedPathError

JsonValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]

_SEGMENT = re.compile(
    r"""
    \.(?P<name>\w+)                       # .name
    | \[(?P<index>\d+)\]                  # [0]
    | \[(?P<quote>["'])(?P<key>[^"'\]]+)(?P=quote)\]   # ["name"]
    """,
    re.VERBOSE,
)


class _Absent:
    """Marker for "no value at this path"; distinct from JSON ``null``."""

    _instance = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


@dataclass(frozen=True)
class PropertySegment:
    """Look up ``name`` in a JSON object."""

    name: str

    def __str__(self) -> str:
        return f'["{self.name}"]'


@dataclass(frozen=True)
class IndexSegment:
    """Look up position ``index`` in a JSON array."""

    index: int

    def __str__(self) -> str:
        return f"[{self.index}]"


Segment = Union[PropertySegment, IndexSegment]


def parse_path(path: str) -> Tuple[Segment, ...]:
    """
    Parse a path expression into typed segments.

    Raises:
        MalformedPathError: If the path is empty or any part of it does not
            match the segment grammar
    """
    if not isinstance(path, str) or not path:
        raise MalformedPathError(str(path))

    segments: List[Segment] = []
    position = 0
    while position < len(path):
        match = _SEGMENT.match(path, position)
        if match is None:
            raise MalformedPathError(path, position=position)
        if match.group("index") is not None:
            segments.append(IndexSegment(int(match.group("index"))))
        else:
            segments.append(PropertySegment(match.group("name") or match.group("key")))
        position = match.end()
    return tuple(segments)


def _step(node: Any, segment: Segment) -> Any:
    if isinstance(segment, IndexSegment):
        if isinstance(node, list):
            if segment.index < len(node):
                return node[segment.index]
            return ABSENT
        if isinstance(node, dict):
            return node.get(str(segment.index), ABSENT)
        return ABSENT

    if isinstance(node, dict):
        return node.get(segment.name, ABSENT)
    return ABSENT


@dataclass(frozen=True)
class JsonPath:
    """
    A parsed path expression.

    Example:
        >>> JsonPath.parse(".result.ProposeGasPrice").extract(
        ...     {"result": {"ProposeGasPrice": "39"}}
        ... )
        '39'
    """

    expression: str
    segments: Tuple[Segment, ...]

    @classmethod
    def parse(cls, expression: str) -> "JsonPath":
        return cls(expression=expression, segments=parse_path(expression))

    def extract(self, tree: JsonValue) -> Any:
        """Return the value at this path, or ``ABSENT`` if there is none."""
        node: Any = tree
        for segment in self.segments:
            node = _step(node, segment)
            if node is ABSENT:
                return ABSENT
        return node

    def __str__(self) -> str:
        return self.expression


def extract(tree: JsonValue, path: str) -> Any:
    """
    Extract one value from ``tree``.

    Args:
        tree: Parsed JSON document
        path: Path expression, e.g. ``.abc[0]["def"].ghi``

    Returns:
        The value at the path, or ``ABSENT`` when the data does not contain it

    Raises:
        MalformedPathError: If the path expression is malformed
    """
    return JsonPath.parse(path).extract(tree)
