from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum, auto
from typing import List, Optional

from .config import DEFAULT_POLICY, LoanPolicy


class Role(Enum):
    MEMBER = auto()
    LIBRARIAN = auto()


@dataclass
class Book:
    book_id: str
    title: str
    author: str
    publisher: str = ""
    available: bool = True

    def is_available(self) -> bool:
        return self.available

    def calculate_fine(self, policy: LoanPolicy = DEFAULT_POLICY) -> float:
        # flat placeholder, not tied to the due date
        return policy.flat_fine

    def mark_returned(self) -> None:
        self.available = True


@dataclass
class Member:
    member_id: int
    name: str
    role: Role = Role.MEMBER
    position: Optional[str] = None
    course: Optional[str] = None
    max_books_allowed: int = DEFAULT_POLICY.max_books_allowed
    books_borrowed: List[Book] = field(default_factory=list)

    @classmethod
    def librarian(cls, member_id: int, name: str, position: str, course: str) -> "Member":
        return cls(
            member_id=member_id,
            name=name,
            role=Role.LIBRARIAN,
            position=position,
            course=course,
        )

    @property
    def is_librarian(self) -> bool:
        return self.role == Role.LIBRARIAN

    def list_books_borrowed(self) -> List[Book]:
        return list(self.books_borrowed)

    def can_borrow_more_books(self) -> bool:
        return len(self.books_borrowed) < self.max_books_allowed

    def has_borrowed(self, book: Book) -> bool:
        return any(b.book_id == book.book_id for b in self.books_borrowed)

    def remove_borrowed(self, book: Book) -> Optional[Book]:
        for i, b in enumerate(self.books_borrowed):
            if b.book_id == book.book_id:
                return self.books_borrowed.pop(i)
        return None


@dataclass
class Loan:
    loan_id: int
    book_id: str
    member_id: int
    issued_at: datetime
    due_at: datetime
    returned_at: Optional[datetime] = None

    @property
    def is_outstanding(self) -> bool:
        return self.returned_at is None

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now()
        return self.returned_at is None and now > self.due_at

    def days_overdue(self, now: Optional[datetime] = None) -> int:
        end = self.returned_at or now or datetime.now()
        return max(0, (end.date() - self.due_at.date()).days)

    def mark_returned(self, when: Optional[datetime] = None) -> None:
        self.returned_at = when or datetime.now()

    def extend(self, days: int) -> None:
        if days <= 0:
            raise ValueError(f"extension must be positive, got {days}")
        self.due_at = self.due_at + timedelta(days=days)


class ReservationStatus(Enum):
    ACTIVE = auto()
    CANCELLED = auto()
    FULFILLED = auto()


@dataclass
class Reservation:
    reservation_id: int
    book_id: str
    member_id: int
    reserved_at: datetime
    status: ReservationStatus = ReservationStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == ReservationStatus.ACTIVE

    def cancel(self) -> bool:
        if not self.is_active:
            return False
        self.status = ReservationStatus.CANCELLED
        return True

    def fulfill(self) -> bool:
        if not self.is_active:
            return False
        self.status = ReservationStatus.FULFILLED
        return True
