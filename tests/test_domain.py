from datetime import datetime, timedelta

import pytest

from libcatalog import Book, Loan, LoanPolicy, Member, Reservation, ReservationStatus, Role


def test_member_defaults():
    m = Member(member_id=7, name="Dana")
    assert m.role == Role.MEMBER
    assert m.max_books_allowed == 3
    assert m.list_books_borrowed() == []
    assert m.can_borrow_more_books()
    assert not m.is_librarian


def test_librarian_carries_role_and_course():
    lib = Member.librarian(9, "Carol", position="Head Librarian", course="Cataloguing")
    assert lib.is_librarian
    assert lib.position == "Head Librarian"
    assert lib.course == "Cataloguing"
    assert lib.max_books_allowed == 3


def test_list_books_borrowed_is_a_copy():
    m = Member(member_id=1, name="Alice")
    m.books_borrowed.append(Book("bk_1", "T", "A"))
    m.list_books_borrowed().clear()
    assert len(m.books_borrowed) == 1


def test_has_borrowed_compares_by_id():
    m = Member(member_id=1, name="Alice")
    m.books_borrowed.append(Book("bk_1", "Same", "Author"))
    assert m.has_borrowed(Book("bk_1", "Other", "Copy"))
    assert not m.has_borrowed(Book("bk_2", "Same", "Author"))


def test_book_fine_is_flat_placeholder():
    assert Book("bk_1", "T", "A").calculate_fine() == 5.0


def test_loan_overdue_and_extend():
    issued = datetime(2024, 1, 1)
    loan = Loan(1, "bk_1", 1, issued_at=issued, due_at=issued + timedelta(days=14))
    assert loan.is_outstanding
    assert not loan.is_overdue(issued + timedelta(days=14))
    assert loan.is_overdue(issued + timedelta(days=16))
    assert loan.days_overdue(issued + timedelta(days=17)) == 3

    loan.extend(7)
    assert loan.due_at == issued + timedelta(days=21)
    with pytest.raises(ValueError):
        loan.extend(0)

    loan.mark_returned(issued + timedelta(days=2))
    assert not loan.is_outstanding
    assert not loan.is_overdue(issued + timedelta(days=40))
    assert loan.days_overdue() == 0


def test_reservation_transitions_are_terminal():
    r = Reservation(1, "bk_1", 1, reserved_at=datetime(2024, 1, 1))
    assert r.status == ReservationStatus.ACTIVE
    assert r.fulfill()
    assert r.status == ReservationStatus.FULFILLED
    assert not r.cancel()
    assert r.status == ReservationStatus.FULFILLED

    r2 = Reservation(2, "bk_1", 1, reserved_at=datetime(2024, 1, 1))
    assert r2.cancel()
    assert not r2.fulfill()
    assert r2.status == ReservationStatus.CANCELLED


@pytest.mark.parametrize("field", ["loan_days", "extension_days", "max_books_allowed"])
def test_policy_rejects_non_positive(field):
    with pytest.raises(ValueError):
        LoanPolicy(**{field: 0})
