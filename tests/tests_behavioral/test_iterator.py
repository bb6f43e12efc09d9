import types

import pytest

from behavioral.iterator import NameRepository


def test_default_names_in_order():
    assert list(NameRepository()) == ["Анна", "Богдан", "Іван"]

def test_iter_returns_lazy_generator():
    cursor = iter(NameRepository())
    assert isinstance(cursor, types.GeneratorType)
    assert next(cursor) == "Анна"

def test_traversals_are_independent():
    repo = NameRepository()
    first = iter(repo)
    second = iter(repo)

    assert next(first) == "Анна"
    assert next(first) == "Богдан"
    assert next(second) == "Анна"

def test_cursor_is_finite():
    cursor = iter(NameRepository(["x"]))
    assert next(cursor) == "x"
    with pytest.raises(StopIteration):
        next(cursor)

def test_repository_copies_source_names():
    names = ["a", "b"]
    repo = NameRepository(names)
    names.append("c")

    assert list(repo) == ["a", "b"]
    assert len(repo) == 2

def test_empty_repository():
    assert list(NameRepository([])) == []
