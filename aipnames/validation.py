"""Collection of field violations and errors for validating request messages."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field


class StatusCode(enum.IntEnum):
    """Canonical RPC status codes."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


@dataclass(frozen=True)
class FieldViolation:
    """A single invalid field and a description of what is wrong with it."""

    field: str
    description: str


@dataclass(frozen=True)
class Status:
    """An RPC status: a code, a message and the field violations behind it."""

    code: StatusCode
    message: str
    details: tuple[FieldViolation, ...] = field(default_factory=tuple)


class ValidationError(Exception):
    """A message validation error made of one or more field violations."""

    def __init__(self, field_violations: Iterable[FieldViolation]) -> None:
        violations = tuple(field_violations)
        if not violations:
            raise ValueError("must provide at least one field violation")
        self._field_violations = violations
        self._status: Status | None = None
        self._text = self._format(violations)
        super().__init__(self._text)

    @staticmethod
    def _format(violations: tuple[FieldViolation, ...]) -> str:
        if len(violations) == 1:
            only = violations[0]
            return f"field violation on {only.field}: {only.description}"
        lines = [f" | {v.field}: {v.description}" for v in violations]
        return "field violation on multiple fields:\n" + "\n".join(lines)

    @property
    def field_violations(self) -> tuple[FieldViolation, ...]:
        """The field violations of this error, in the order they were added."""
        return self._field_violations

    def grpc_status(self) -> Status:
        """Return an INVALID_ARGUMENT status describing the invalid fields."""
        if self._status is None:
            fields = ", ".join(v.field for v in self._field_violations)
            self._status = Status(
                code=StatusCode.INVALID_ARGUMENT,
                message=f"invalid fields: {fields}",
                details=self._field_violations,
            )
        return self._status

    def __str__(self) -> str:
        return self._text


def _join_field(parent_field: str, field_name: str) -> str:
    if not parent_field:
        return field_name
    return f"{parent_field}.{field_name}"


class MessageValidator:
    """Accumulates field violations found while validating a message."""

    def __init__(self, parent_field: str = "") -> None:
        self.parent_field = parent_field
        self._violations: list[FieldViolation] = []

    def add_field_violation(self, field: str, description: str, *args: object) -> None:
        """Record a violation; description is %-formatted with args when any are given."""
        if self.parent_field:
            field = _join_field(self.parent_field, field)
        if args:
            description = description % args
        self._violations.append(FieldViolation(field, description))

    def add_field_error(self, field: str, err: BaseException) -> None:
        """Record a violation from an error; nested validation errors keep their fields."""
        if isinstance(err, ValidationError):
            original = self.parent_field
            self.parent_field = _join_field(original, field)
            try:
                for violation in err.field_violations:
                    self.add_field_violation(violation.field, violation.description)
            finally:
                self.parent_field = original
        else:
            self.add_field_violation(field, str(err))

    def err(self) -> ValidationError | None:
        """Return the validation error so far, or None when nothing was recorded."""
        if self._violations:
            return ValidationError(self._violations)
        return None

    def raise_if_invalid(self) -> None:
        """Raise the validation error when any violation was recorded."""
        error = self.err()
        if error is not None:
            raise error