# aipnames

Tools for working with resource names in the style of the API Improvement
Proposals (AIP-122): scanning segments, matching against patterns, formatting
and parsing names, validating them, and collecting field violations for
request validation. Pure Python, no dependencies.

## Installation

```
pip install aipnames
```

## Resource names

```python
from aipnames.resourcename import (
    ancestor, contains_wildcard, has_parent, match, parents, sprint, sscan,
)

sprint("publishers/{publisher}/books/{book}", "foo", "bar")
# 'publishers/foo/books/bar'

sscan("publishers/foo/books/bar", "publishers/{publisher}/books/{book}", 2)
# ('foo', 'bar')

match("shippers/{shipper}/sites/{site}", "shippers/1/sites/1")   # True
has_parent("shippers/1/sites/1", "shippers/-")                   # True
has_parent("shippers/1/sites/1@beef", "shippers/1/sites/1")      # True
ancestor("foo/1/bar/2", "foo/{foo}")                             # 'foo/1'
ancestor("foo/1/bar/2", "baz/{baz}")                             # None
contains_wildcard("foo/-/bar")                                   # True
list(parents("foo/bar/baz/123"))                                 # ['foo', 'foo/bar', 'foo/bar/baz']
```

- `sprint` fills variables in order; missing values become empty segments and
  extra values are ignored.
- `sscan` takes the number of variables expected and returns their values as a
  tuple. It raises `ScanError` (a `ValueError`) when the name does not fit the
  pattern: trailing segments, too few or too many variables, a mismatched
  literal segment, or a full resource name used as the pattern.
- `parents` yields collection segments too, so no pattern is needed; for a
  full resource name the service is left out.

Full resource names such as `//library.example.com/publishers/123` are
understood: the service name is set apart from the segments.

### Scanning

```python
from aipnames.scanner import Scanner, segments

sc = Scanner("//library.example.com/publishers/123")
while sc.scan():
    print(sc.segment(), sc.start(), sc.end())
sc.full()           # True
sc.service_name()   # 'library.example.com'

list(segments("shippers/1/settings"))  # ['shippers', '1', 'settings']
```

A `Segment` is a `str` that can tell whether it is a variable (`{name}`,
`is_variable()`) or the wildcard `-` (`is_wildcard()`). Its `literal()` is a
`Literal`, which separates a resource ID from a revision ID written as
`id@revision` (`has_revision()`, `resource_id()`, `revision_id()`).

### Validation

```python
from aipnames.validate import validate, validate_pattern, InvalidResourceNameError

validate("//example.com/foo/bar")          # passes
validate_pattern("fooBars/{foo_bar}")      # passes
validate_pattern("foo/-")                  # raises InvalidResourceNameError
validate("foo/bar/{baz}")                  # raises: names must not contain variables
```

Segments and service names must be valid DNS labels (`is_domain_name`);
pattern variable names must be snake case (`is_snake_case`). Patterns may not
contain wildcards or be full resource names. `InvalidResourceNameError` is a
`ValueError`.

## Request validation

```python
from aipnames.validation import MessageValidator

v = MessageValidator()
v.add_field_violation("display_name", "must be at most %d characters", 63)
err = v.err()            # a ValidationError, or None
print(err)               # field violation on display_name: must be at most 63 characters

status = err.grpc_status()
status.code              # StatusCode.INVALID_ARGUMENT
status.message           # 'invalid fields: display_name'
status.details           # (FieldViolation(field='display_name', description=...),)

v.raise_if_invalid()     # raises the ValidationError
```

`MessageValidator(parent_field="...")` prefixes every field with the parent
and a dot. `add_field_error` adds the violations of a nested `ValidationError`
under the given field; any other exception is recorded with its message.
With several violations the error text lists one ` | field: description` line
each. Creating a `ValidationError` with no violations raises `ValueError`.

## What it does not do

`Status` and `StatusCode` are plain data types describing an RPC status; the
package does not talk to any RPC framework or encode statuses on the wire.
It has no command-line tool.