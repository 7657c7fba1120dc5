"""Typed locations inside a document tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class Missing(Enum):
    """Marker for an absent location; distinct from a stored ``null``."""

    MISSING = "MISSING"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing.MISSING


@dataclass(frozen=True)
class MappingKey:
    """Step addressing a mapping entry by key."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class SequenceIndex:
    """Step addressing a sequence element by position."""

    index: int

    def __post_init__(self) -> None:
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"Sequence index must be an integer, got {self.index!r}.")
        if self.index < 0:
            raise ValueError(f"Sequence index must not be negative, got {self.index}.")

    def __str__(self) -> str:
        return str(self.index)


Step = MappingKey | SequenceIndex
RawStep = str | int | MappingKey | SequenceIndex


def as_step(raw: RawStep) -> Step:
    """Convert a raw key/index value into a typed step."""
    if isinstance(raw, (MappingKey, SequenceIndex)):
        return raw
    if isinstance(raw, str):
        return MappingKey(raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        return SequenceIndex(raw)
    raise TypeError(f"Unsupported path step: {raw!r}")


@dataclass(frozen=True)
class DocumentPath:
    """Ordered sequence of steps locating exactly one node from the document root.

    Paths are cheap value objects. They are rebuilt for every operation and
    must not be kept across mutations: removing a sequence element renumbers
    the elements after it.
    """

    steps: tuple[Step, ...] = ()

    @classmethod
    def of(cls, *raw_steps: RawStep) -> DocumentPath:
        """Build a path from raw keys (``str``) and indices (``int``)."""
        return cls(tuple(as_step(raw) for raw in raw_steps))

    @classmethod
    def coerce(cls, value: DocumentPath | Iterable[RawStep]) -> DocumentPath:
        """Accept an existing path or any iterable of raw steps."""
        if isinstance(value, DocumentPath):
            return value
        if isinstance(value, (str, bytes)):
            raise TypeError("A path must be a sequence of steps, not a single string.")
        return cls.of(*value)

    @property
    def parent(self) -> DocumentPath:
        return DocumentPath(self.steps[:-1])

    @property
    def last(self) -> Step | None:
        return self.steps[-1] if self.steps else None

    def child(self, step: RawStep) -> DocumentPath:
        return DocumentPath((*self.steps, as_step(step)))

    def to_reference(self) -> str:
        """Render the path with internal reference syntax (``#/a/b/0``)."""
        return "#/" + "/".join(str(step) for step in self.steps)

    def __add__(self, other: DocumentPath | Iterable[RawStep]) -> DocumentPath:
        return DocumentPath((*self.steps, *DocumentPath.coerce(other).steps))

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return self.to_reference()


ROOT_PATH = DocumentPath()


def coerce_path(value: DocumentPath | Iterable[RawStep]) -> DocumentPath | None:
    """Return the path ``value`` describes, or None when a step is malformed.

    Callers treat None as "nothing addressed": reads miss, writes do nothing.
    """
    try:
        return DocumentPath.coerce(value)
    except (TypeError, ValueError):
        return None
