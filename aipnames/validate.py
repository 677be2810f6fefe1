"""Validation of resource names and resource name patterns."""

from __future__ import annotations

from aipnames.scanner import WILDCARD, Scanner


class InvalidResourceNameError(ValueError):
    """Raised when a resource name or pattern is not valid."""


def is_domain_name(s: str) -> bool:
    """Report whether s is a syntactically valid DNS name."""
    length = len(s.encode("utf-8"))
    if length == 0 or length > 254 or (length == 254 and not s.endswith(".")):
        return False
    last = "."
    part_length = 0
    for c in s:
        if c.isascii() and (c.isalnum() or c == "_"):
            part_length += 1
        elif c == "-":
            if last == ".":
                return False
            part_length += 1
        elif c == ".":
            if last in ".-":
                return False
            if part_length > 63 or part_length == 0:
                return False
            part_length = 0
        else:
            return False
        last = c
    return last != "-" and part_length <= 63


def is_snake_case(s: str) -> bool:
    """Report whether s starts with a lower-case letter and holds only lower case, digits and underscores."""
    if not s:
        return True
    first, rest = s[0], s[1:]
    if not first.islower():
        return False
    return all(r == "_" or r.islower() or r.isdecimal() for r in rest)


def validate(name: str) -> None:
    """Raise InvalidResourceNameError unless name is a valid resource name."""
    if not name:
        raise InvalidResourceNameError("empty")
    scanner = Scanner(name)
    index = 0
    while scanner.scan():
        index += 1
        segment = scanner.segment()
        if segment == "":
            raise InvalidResourceNameError(f"segment {index} is empty")
        if segment == WILDCARD:
            continue
        if segment.is_variable():
            raise InvalidResourceNameError(
                f"segment '{segment}': valid resource names must not contain variables"
            )
        if not is_domain_name(segment):
            raise InvalidResourceNameError(f"segment '{segment}': not a valid DNS name")
    if scanner.full() and not is_domain_name(scanner.service_name()):
        raise InvalidResourceNameError(
            f"service '{scanner.service_name()}': not a valid DNS name"
        )


def validate_pattern(pattern: str) -> None:
    """Raise InvalidResourceNameError unless pattern is a valid resource name pattern."""
    if not pattern:
        raise InvalidResourceNameError("empty")
    scanner = Scanner(pattern)
    index = 0
    while scanner.scan():
        index += 1
        segment = scanner.segment()
        if segment == "":
            raise InvalidResourceNameError(f"segment {index} is empty")
        if segment == WILDCARD:
            raise InvalidResourceNameError(
                f"segment '{index}': wildcards not allowed in patterns"
            )
        if segment.is_variable():
            variable = segment.literal()
            if variable == "":
                raise InvalidResourceNameError(f"segment '{segment}': missing variable name")
            if not is_snake_case(variable):
                raise InvalidResourceNameError(
                    f"segment '{segment}': must be valid snake case"
                )
        elif not is_domain_name(segment):
            raise InvalidResourceNameError(f"segment '{segment}': not a valid DNS name")
    if scanner.full():
        raise InvalidResourceNameError("patterns can not be full resource names")