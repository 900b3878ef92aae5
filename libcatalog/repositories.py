from __future__ import annotations
from datetime import datetime
from typing import Dict, Iterator, List, Optional, Tuple
import itertools

from .domain import (
    Book,
    Member,
    Loan,
    Reservation,
    ReservationStatus,
)


class BookRepo:
    def __init__(self) -> None:
        self._books: List[Book] = []

    def add(self, book: Book) -> None:
        self._books.append(book)

    def snapshot(self) -> Tuple[Book, ...]:
        return tuple(self._books)

    def search_author(self, text: str) -> List[Book]:
        t = text.lower()
        return [b for b in self._books if t in b.author.lower()]

    def search_title(self, text: str) -> List[Book]:
        t = text.lower()
        return [b for b in self._books if t in b.title.lower()]


class MemberRepo:
    def __init__(self) -> None:
        # duplicate ids are allowed; lookups return the first registered
        self._members: List[Member] = []

    def add(self, member: Member) -> None:
        self._members.append(member)

    def get(self, member_id: int) -> Optional[Member]:
        return next((m for m in self._members if m.member_id == member_id), None)

    def list_all(self) -> List[Member]:
        return list(self._members)

    def list_borrowing(self) -> List[Member]:
        return [m for m in self._members if m.books_borrowed]


class LoanRepo:
    def __init__(self) -> None:
        self._loans: Dict[int, Loan] = {}
        self._ids: Iterator[int] = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def add(self, loan: Loan) -> None:
        self._loans[loan.loan_id] = loan

    def list_all(self) -> List[Loan]:
        return list(self._loans.values())

    def list_by_member(self, member_id: int) -> List[Loan]:
        return [l for l in self._loans.values() if l.member_id == member_id]

    def list_outstanding(self) -> List[Loan]:
        return [l for l in self._loans.values() if l.is_outstanding]

    def find_outstanding(self, book_id: str, member_id: Optional[int] = None) -> Optional[Loan]:
        for l in self._loans.values():
            if l.book_id != book_id or not l.is_outstanding:
                continue
            if member_id is None or l.member_id == member_id:
                return l
        return None

    def list_overdue(self, now: Optional[datetime] = None) -> List[Loan]:
        return [l for l in self._loans.values() if l.is_overdue(now)]


class ReservationRepo:
    def __init__(self) -> None:
        self._reservations: Dict[int, Reservation] = {}
        self._ids: Iterator[int] = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def add(self, r: Reservation) -> None:
        self._reservations[r.reservation_id] = r

    def get(self, reservation_id: int) -> Optional[Reservation]:
        return self._reservations.get(reservation_id)

    def list_active_for_book(self, book_id: str) -> List[Reservation]:
        items = [
            r
            for r in self._reservations.values()
            if r.book_id == book_id and r.status == ReservationStatus.ACTIVE
        ]
        # FIFO by reserved_at, ties keep insertion order
        return sorted(items, key=lambda r: r.reserved_at)

    def find_active(self, book_id: str, member_id: int) -> Optional[Reservation]:
        return next(
            (r for r in self.list_active_for_book(book_id) if r.member_id == member_id),
            None,
        )

    def list_by_member(self, member_id: int) -> List[Reservation]:
        return [r for r in self._reservations.values() if r.member_id == member_id]
