"""Scanning of resource names and resource name patterns into segments."""

from __future__ import annotations

from collections.abc import Iterator

WILDCARD = "-"
REVISION_SEPARATOR = "@"


class Literal(str):
    """The literal part of a segment: a resource ID, optionally with a revision ID."""

    __slots__ = ()

    def has_revision(self) -> bool:
        """Report whether the literal holds exactly one revision separator with content on each side."""
        index = self.find(REVISION_SEPARATOR)
        if index < 1 or index >= len(self) - 1:
            return False
        return REVISION_SEPARATOR not in self[index + 1 :]

    def resource_id(self) -> str:
        """Return the resource ID, without any revision."""
        if not self.has_revision():
            return str(self)
        return str(self[: self.index(REVISION_SEPARATOR)])

    def revision_id(self) -> str:
        """Return the revision ID, or an empty string when there is none."""
        if not self.has_revision():
            return ""
        return str(self[self.index(REVISION_SEPARATOR) + 1 :])


class Segment(str):
    """A segment of a resource name or of a resource name pattern."""

    __slots__ = ()

    def is_variable(self) -> bool:
        """Report whether the segment is a variable such as ``{name}``."""
        return len(self) > 2 and self.startswith("{") and self.endswith("}")

    def literal(self) -> Literal:
        """Return the literal value; for a variable, the variable's name."""
        if self.is_variable():
            return Literal(self[1:-1])
        return Literal(self)

    def is_wildcard(self) -> bool:
        """Report whether the segment is the wildcard ``-``."""
        return self == WILDCARD


class Scanner:
    """Step through the segments of a resource name one at a time."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._start = 0
        self._end = 0
        self._service_start = 0
        self._service_end = 0
        self._full = False

    def scan(self) -> bool:
        """Advance to the next segment; return False when there are no more."""
        name = self._name
        if self._end == len(name):
            return False
        if self._end == 0:
            if name.startswith("//"):
                self._full = True
                next_slash = name.find("/", 2)
                if next_slash == -1:
                    self._service_start, self._service_end = 2, len(name)
                    self._start = self._end = len(name)
                    return False
                self._service_start, self._service_end = 2, next_slash
                self._start = self._end = next_slash + 1
            elif name.startswith("/"):
                self._start = self._end + 1
        else:
            self._start = self._end + 1
        next_slash = name.find("/", self._start)
        self._end = len(name) if next_slash == -1 else next_slash
        return True

    def start(self) -> int:
        """Return the start index (inclusive) of the current segment."""
        return self._start

    def end(self) -> int:
        """Return the end index (exclusive) of the current segment."""
        return self._end

    def segment(self) -> Segment:
        """Return the current segment."""
        return Segment(self._name[self._start : self._end])

    def full(self) -> bool:
        """Report whether the name is a full resource name (``//service/...``)."""
        return self._full

    def service_name(self) -> str:
        """Return the service name of a full resource name."""
        return self._name[self._service_start : self._service_end]


def segments(name: str) -> Iterator[Segment]:
    """Yield the segments of a resource name in order."""
    scanner = Scanner(name)
    while scanner.scan():
        yield scanner.segment()