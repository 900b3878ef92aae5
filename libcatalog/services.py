from __future__ import annotations
from datetime import datetime, timedelta
from typing import List, Optional, Tuple
import logging
import uuid

from .config import DEFAULT_POLICY, LoanPolicy
from .domain import (
    Book,
    Member,
    Loan,
    Reservation,
)
from .repositories import (
    BookRepo,
    MemberRepo,
    LoanRepo,
    ReservationRepo,
)

logger = logging.getLogger(__name__)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


class CatalogService:
    def __init__(self, books: BookRepo) -> None:
        self.books = books

    def add_book(self, book: Book) -> Book:
        self.books.add(book)
        logger.debug("[catalog] added %s (%s)", book.title, book.book_id)
        return book

    def new_book(self, title: str, author: str, publisher: str = "") -> Book:
        b = Book(book_id=_new_id("bk"), title=title, author=author, publisher=publisher)
        return self.add_book(b)

    def search_by_author(self, text: str) -> List[Book]:
        return self.books.search_author(text)

    def search_by_title(self, text: str) -> List[Book]:
        return self.books.search_title(text)

    def list_all(self) -> Tuple[Book, ...]:
        return self.books.snapshot()


class MemberService:
    def __init__(self, members: MemberRepo, policy: LoanPolicy = DEFAULT_POLICY) -> None:
        self.members = members
        self.policy = policy

    def register(self, member: Member) -> Member:
        if self.members.get(member.member_id) is not None:
            logger.warning("[register] member id %s is already in use", member.member_id)
        self.members.add(member)
        return member

    def new_member(self, member_id: int, name: str) -> Member:
        m = Member(
            member_id=member_id,
            name=name,
            max_books_allowed=self.policy.max_books_allowed,
        )
        return self.register(m)

    def find_by_id(self, member_id: int) -> Optional[Member]:
        return self.members.get(member_id)

    def list_borrowing(self) -> List[Member]:
        return self.members.list_borrowing()


class ReservationService:
    def __init__(self, reservations: ReservationRepo) -> None:
        self.reservations = reservations

    def reserve(
        self, book: Book, member: Member, now: Optional[datetime] = None
    ) -> Optional[Reservation]:
        now = now or datetime.now()
        if self.reservations.find_active(book.book_id, member.member_id):
            logger.info("[reserve] %s already holds a reservation for %s", member.name, book.title)
            return None
        r = Reservation(
            reservation_id=self.reservations.next_id(),
            book_id=book.book_id,
            member_id=member.member_id,
            reserved_at=now,
        )
        self.reservations.add(r)
        return r

    def cancel(self, reservation_id: int) -> bool:
        r = self.reservations.get(reservation_id)
        if r is None:
            logger.info("[reserve] no reservation %s", reservation_id)
            return False
        return r.cancel()

    def queue_for(self, book: Book) -> List[Reservation]:
        return self.reservations.list_active_for_book(book.book_id)

    def list_for_member(self, member: Member) -> List[Reservation]:
        return self.reservations.list_by_member(member.member_id)


class CirculationService:
    def __init__(
        self,
        loans: LoanRepo,
        reservations: ReservationRepo,
        policy: LoanPolicy = DEFAULT_POLICY,
    ):
        self.loans = loans
        self.reservations = reservations
        self.policy = policy

    def borrow_book(
        self, book: Book, member: Member, now: Optional[datetime] = None
    ) -> Optional[Loan]:
        now = now or datetime.now()
        if not member.can_borrow_more_books():
            logger.info("[borrow] %s is at the limit of %d books", member.name, member.max_books_allowed)
            return None
        if not book.is_available():
            logger.info("[borrow] %s is not available", book.title)
            return None
        if self.loans.find_outstanding(book.book_id) is not None:
            logger.warning("[borrow] %s already has an outstanding loan", book.book_id)
            return None

        book.available = False
        loan = Loan(
            loan_id=self.loans.next_id(),
            book_id=book.book_id,
            member_id=member.member_id,
            issued_at=now,
            due_at=now + timedelta(days=self.policy.loan_days),
        )
        member.books_borrowed.append(book)
        self.loans.add(loan)

        held = self.reservations.find_active(book.book_id, member.member_id)
        if held:
            held.fulfill()
            logger.info("[borrow] reservation %s fulfilled", held.reservation_id)

        logger.info("[borrow] %s borrowed by %s, due %s", book.title, member.name, loan.due_at.date())
        return loan

    def return_book(
        self, book: Book, member: Member, now: Optional[datetime] = None
    ) -> bool:
        now = now or datetime.now()
        if not member.has_borrowed(book):
            logger.info("[return] %s has not borrowed %s", member.name, book.title)
            return False
        loan = self.loans.find_outstanding(book.book_id, member.member_id)
        if loan is None:
            logger.warning(
                "[return] no outstanding loan for %s held by %s", book.book_id, member.member_id
            )
            return False

        held_copy = member.remove_borrowed(book)
        held_copy.mark_returned()
        loan.mark_returned(now)

        queue = self.reservations.list_active_for_book(book.book_id)
        if queue:
            logger.info(
                "[return] notifying next in queue (member=%s) for book=%s",
                queue[0].member_id,
                book.title,
            )
        logger.info("[return] %s returned by %s", book.title, member.name)
        return True

    def extend_loan(self, book: Book) -> bool:
        loan = self.loans.find_outstanding(book.book_id)
        if loan is None:
            logger.info("[extend] no outstanding loan for %s", book.title)
            return False
        loan.extend(self.policy.extension_days)
        logger.info("[extend] loan %s now due %s", loan.loan_id, loan.due_at.date())
        return True

    def list_member_loans(self, member: Member) -> List[Loan]:
        return self.loans.list_by_member(member.member_id)

    def list_outstanding_loans(self) -> List[Loan]:
        return self.loans.list_outstanding()

    def list_overdue_loans(self, now: Optional[datetime] = None) -> List[Loan]:
        return self.loans.list_overdue(now)
