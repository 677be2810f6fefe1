"""Operations on resource names: matching, parents, formatting and parsing."""

from __future__ import annotations

from collections.abc import Iterator

from aipnames.scanner import Scanner


class ScanError(ValueError):
    """Raised when a resource name cannot be parsed with a pattern."""


def ancestor(name: str, pattern: str) -> str | None:
    """Return the ancestor of name that matches pattern, or None when there is none."""
    if not name or not pattern:
        return None
    name_scanner = Scanner(name)
    pattern_scanner = Scanner(pattern)
    while pattern_scanner.scan():
        if not name_scanner.scan():
            return None
        segment = pattern_scanner.segment()
        if segment.is_wildcard():
            return None
        if not segment.is_variable() and segment != name_scanner.segment():
            return None
    return name[: name_scanner.end()]


def contains_wildcard(name: str) -> bool:
    """Report whether name holds any wildcard segment."""
    scanner = Scanner(name)
    while scanner.scan():
        if scanner.segment().is_wildcard():
            return True
    return False


def has_parent(name: str, parent: str) -> bool:
    """Report whether name has the given parent, honouring wildcards and revisions."""
    if not name or not parent or name == parent:
        return False
    parent_scanner = Scanner(parent)
    name_scanner = Scanner(name)
    while parent_scanner.scan():
        if not name_scanner.scan():
            return False
        parent_segment = parent_scanner.segment()
        name_segment = name_scanner.segment()
        if parent_segment.is_wildcard():
            continue
        name_literal = name_segment.literal()
        parent_literal = parent_segment.literal()
        if (
            name_literal.has_revision()
            and not parent_literal.has_revision()
            and name_literal.resource_id() == parent_literal.resource_id()
        ):
            continue
        if parent_segment != name_segment:
            return False
    if parent_scanner.full() and name_scanner.full():
        return parent_scanner.service_name() == name_scanner.service_name()
    return True


def match(pattern: str, name: str) -> bool:
    """Report whether name matches the resource name pattern."""
    name_scanner = Scanner(name)
    pattern_scanner = Scanner(pattern)
    while pattern_scanner.scan():
        if not name_scanner.scan():
            return False
        name_segment = name_scanner.segment()
        if name_segment.is_variable():
            return False
        pattern_segment = pattern_scanner.segment()
        if pattern_segment.is_wildcard():
            return False
        if pattern_segment.is_variable():
            if name_segment == "":
                return False
        elif name_segment != pattern_segment:
            return False
    if (
        name_scanner.scan()
        or pattern_scanner.segment() == ""
        or pattern_scanner.full()
    ):
        return False
    return True


def parents(name: str) -> Iterator[str]:
    """Yield every parent of name, from the root down to the closest, omitting any service."""
    scanner = Scanner(name)
    if not scanner.scan():
        return
    start = scanner.start()
    if scanner.end() != len(name):
        yield name[start : scanner.end()]
    while scanner.scan():
        if scanner.end() != len(name):
            yield name[start : scanner.end()]


def sprint(pattern: str, *args: str) -> str:
    """Fill the variables of pattern with args in order and return the name."""
    values = iter(args)
    parts = []
    scanner = Scanner(pattern)
    while scanner.scan():
        segment = scanner.segment()
        if segment.is_variable():
            parts.append(next(values, ""))
        else:
            parts.append(str(segment.literal()))
    return "/".join(parts)


def sscan(name: str, pattern: str, count: int) -> tuple[str, ...]:
    """Parse name with pattern and return the values of its count variables."""
    try:
        return _sscan(name, pattern, count)
    except ScanError as err:
        raise ScanError(
            f"parse resource name '{name}' with pattern '{pattern}': {err}"
        ) from None


def _sscan(name: str, pattern: str, count: int) -> tuple[str, ...]:
    name_scanner = Scanner(name)
    pattern_scanner = Scanner(pattern)
    values: list[str] = []
    while pattern_scanner.scan():
        if pattern_scanner.full():
            raise ScanError("invalid pattern")
        pattern_segment = pattern_scanner.segment()
        if not name_scanner.scan():
            raise ScanError(f"segment {pattern_segment}: unexpected EOF")
        name_segment = name_scanner.segment()
        if not pattern_segment.is_variable():
            if pattern_segment.literal() != name_segment.literal():
                raise ScanError(f"segment {pattern_segment}: got {name_segment}")
            continue
        if len(values) >= count:
            raise ScanError(f"segment {pattern_segment}: too few variables")
        values.append(str(name_segment.literal()))
    if name_scanner.scan():
        raise ScanError("got trailing segments in name")
    if len(values) != count:
        raise ScanError(f"too many variables: got {len(values)} but expected {count}")
    return tuple(values)