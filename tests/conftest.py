from datetime import datetime

import pytest

from libcatalog import Book, Library, Member


@pytest.fixture
def now():
    return datetime(2024, 3, 1, 10, 0, 0)


@pytest.fixture
def lib():
    return Library(name="Central Library", address="123 Main St")


@pytest.fixture
def book1(lib):
    return lib.add_book(Book("bk_1", "C# Programming", "John Doe", "Tech Books"))


@pytest.fixture
def book2(lib):
    return lib.add_book(Book("bk_2", "Data Structures", "Jane Smith", "Study Press"))


@pytest.fixture
def alice(lib):
    return lib.register_member(Member(member_id=1, name="Alice"))


@pytest.fixture
def bob(lib):
    return lib.register_member(Member(member_id=2, name="Bob"))
