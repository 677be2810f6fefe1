import pytest

from aipnames.resourcename import (
    ScanError,
    ancestor,
    contains_wildcard,
    has_parent,
    match,
    parents,
    sprint,
    sscan,
)


@pytest.mark.parametrize(
    "name, pattern, expected",
    [
        ("", "", None),
        ("foo/1/bar/2", "", None),
        ("", "foo/{foo}", None),
        ("foo/1/bar/2", "baz/{baz}", None),
        ("foo/1/bar/2", "foo/{foo}", "foo/1"),
        ("//foo.example.com/foo/1/bar/2", "foo/{foo}", "//foo.example.com/foo/1"),
    ],
)
def test_ancestor(name, pattern, expected):
    assert ancestor(name, pattern) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("", False),
        ("foo", False),
        ("-", True),
        ("foo/bar", False),
        ("-/bar", True),
        ("foo/-", True),
        ("foo/-/bar", True),
    ],
)
def test_contains_wildcard(name, expected):
    assert contains_wildcard(name) is expected


@pytest.mark.parametrize(
    "name, parent, expected",
    [
        ("shippers/1/sites/1", "shippers/1", True),
        ("shippers/1/sites/1/settings", "shippers/1/sites/1/settings", False),
        ("shippers/1/sites/1", "", False),
        ("", "", False),
        ("shippers/1/sites/1/settings", "shippers/1/sites/1", True),
        ("shippers/1/sites/1", "shippers/-", True),
        ("//freight-example.einride.tech/shippers/1/sites/1", "shippers/-", True),
        ("shippers/1/sites/1", "//freight-example.einride.tech/shippers/-", True),
        (
            "//other-example.einride.tech/shippers/1/sites/1",
            "//freight-example.einride.tech/shippers/-",
            False,
        ),
        ("shippers/1/sites/1@beef", "shippers/1/sites/1", True),
        ("shippers/1/sites/1@beef", "shippers/1/sites/1@dead", False),
        ("shippers/1/sites/1@beef", "shippers/1/sites/1@beef", False),
        ("datasets/1@beef/tables/1", "datasets/1@beef", True),
        ("datasets/1/tables/1", "datasets/1@beef", False),
        ("datasets/1@dead/tables/1", "datasets/1@beef", False),
        ("datasets/1@beef/tables/1", "datasets/1", True),
    ],
)
def test_has_parent(name, parent, expected):
    assert has_parent(name, parent) is expected


@pytest.mark.parametrize(
    "name, pattern, expected",
    [
        ("shippers/1/sites/1", "shippers/{shipper}/sites/{site}", True),
        ("shippers/1/sites/1/settings", "shippers/{shipper}/sites/{site}", False),
        ("shippers/1/sites/1", "", False),
        ("", "", False),
        (
            "shippers/1/sites/1/settings",
            "shippers/{shipper}/sites/{site}/settings",
            True,
        ),
        ("shippers/1/sites/1", "shippers/-/sites/-", False),
        (
            "//freight-example.einride.tech/shippers/1/sites/1",
            "shippers/{shipper}/sites/{site}",
            True,
        ),
        ("shippers/1", "//freight-example.einride.tech/shippers/{shipper}", False),
        ("/shippers/1", "shippers/{shipper}", True),
        ("shippers/1", "/shippers/{shipper}", True),
    ],
)
def test_match(name, pattern, expected):
    assert match(pattern, name) is expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("", []),
        ("foo", []),
        ("foo/bar", ["foo"]),
        ("foo/bar/baz/123", ["foo", "foo/bar", "foo/bar/baz"]),
        ("//test.example.com/foo/bar/baz/123", ["foo", "foo/bar", "foo/bar/baz"]),
    ],
)
def test_parents(name, expected):
    assert list(parents(name)) == expected


def test_parents_stops_early():
    iterator = parents("foo/bar/baz/123")
    assert next(iterator) == "foo"


@pytest.mark.parametrize(
    "pattern, variables, expected",
    [
        ("singleton", [], "singleton"),
        ("singleton", ["foo"], "singleton"),
        ("publishers/{publisher}", ["foo"], "publishers/foo"),
        ("publishers/{publisher}/books/{book}", ["foo", "bar"], "publishers/foo/books/bar"),
        (
            "publishers/{publisher}/books/{book}/settings",
            ["foo", "bar"],
            "publishers/foo/books/bar/settings",
        ),
        ("publishers/{publisher}/books/{book}", ["foo", ""], "publishers/foo/books/"),
        (
            "publishers/{publisher}/books/{book}/settings",
            ["foo"],
            "publishers/foo/books//settings",
        ),
    ],
)
def test_sprint(pattern, variables, expected):
    assert sprint(pattern, *variables) == expected


def test_sscan_no_variables():
    assert sscan("publishers", "publishers", 0) == ()


def test_sscan_single_variable():
    assert sscan("publishers/foo", "publishers/{publisher}", 1) == ("foo",)


def test_sscan_two_variables():
    assert sscan(
        "publishers/foo/books/bar", "publishers/{publisher}/books/{book}", 2
    ) == ("foo", "bar")


def test_sscan_two_variables_singleton():
    assert sscan(
        "publishers/foo/books/bar/settings",
        "publishers/{publisher}/books/{book}/settings",
        2,
    ) == ("foo", "bar")


def test_sscan_trailing_segments():
    with pytest.raises(ScanError, match="trailing"):
        sscan("publishers/foo/books/bar/settings", "publishers/{publisher}/books/{book}", 2)


def test_sscan_too_few_variables():
    with pytest.raises(ScanError, match="too few variables"):
        sscan("publishers/foo/books/bar/settings", "publishers/{publisher}/books/{book}", 1)


def test_sscan_too_many_variables():
    with pytest.raises(ScanError, match="too many variables"):
        sscan("publishers/foo/books/bar", "publishers/{publisher}/books/{book}", 3)


def test_sscan_unexpected_eof_message():
    with pytest.raises(ScanError, match="parse resource name 'publishers'"):
        sscan("publishers", "publishers/{publisher}", 1)


def test_sscan_sprint_round_trip():
    pattern = "publishers/{publisher}/books/{book}"
    assert sscan(sprint(pattern, "p1", "b2"), pattern, 2) == ("p1", "b2")