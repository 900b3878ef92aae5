from __future__ import annotations
from datetime import datetime
from typing import List, Optional, Tuple

from .config import DEFAULT_POLICY, LoanPolicy
from .domain import Book, Loan, Member, Reservation
from .repositories import BookRepo, LoanRepo, MemberRepo, ReservationRepo
from .services import CatalogService, CirculationService, MemberService, ReservationService


class Library:
    """
    The catalog aggregate: owns books, members, loans and reservations and
    offers a compact API over the services.

    Expected failures come back as ``None`` or ``False``; nothing here raises
    for a business rule.
    """

    def __init__(
        self,
        name: str = "",
        address: str = "",
        policy: LoanPolicy = DEFAULT_POLICY,
    ) -> None:
        self.name = name
        self.address = address
        self.policy = policy

        # repos
        self.books = BookRepo()
        self.members = MemberRepo()
        self.loans = LoanRepo()
        self.reservations = ReservationRepo()

        # services
        self.catalog = CatalogService(self.books)
        self.member_service = MemberService(self.members, policy)
        self.reservation_service = ReservationService(self.reservations)
        self.circulation = CirculationService(self.loans, self.reservations, policy)

    # ---- catalog
    def add_book(self, book: Book) -> Book:
        return self.catalog.add_book(book)

    def new_book(self, title: str, author: str, publisher: str = "") -> Book:
        return self.catalog.new_book(title, author, publisher)

    def search_by_author(self, text: str) -> List[Book]:
        return self.catalog.search_by_author(text)

    def search_by_title(self, text: str) -> List[Book]:
        return self.catalog.search_by_title(text)

    def list_all_books(self) -> Tuple[Book, ...]:
        return self.catalog.list_all()

    def calculate_fine(self, book: Book) -> float:
        return book.calculate_fine(self.policy)

    # ---- members
    def register_member(self, member: Member) -> Member:
        return self.member_service.register(member)

    def new_member(self, member_id: int, name: str) -> Member:
        return self.member_service.new_member(member_id, name)

    def find_member_by_id(self, member_id: int) -> Optional[Member]:
        return self.member_service.find_by_id(member_id)

    def list_borrowing_members(self) -> List[Member]:
        return self.member_service.list_borrowing()

    # ---- circulation
    def borrow_book(
        self, book: Book, member: Member, now: Optional[datetime] = None
    ) -> Optional[Loan]:
        return self.circulation.borrow_book(book, member, now)

    def return_book(self, book: Book, member: Member, now: Optional[datetime] = None) -> bool:
        return self.circulation.return_book(book, member, now)

    def extend_loan(self, book: Book) -> bool:
        return self.circulation.extend_loan(book)

    def list_member_loans(self, member: Member) -> List[Loan]:
        return self.circulation.list_member_loans(member)

    def list_outstanding_loans(self) -> List[Loan]:
        return self.circulation.list_outstanding_loans()

    # ---- reservations
    def reserve_book(
        self, book: Book, member: Member, now: Optional[datetime] = None
    ) -> Optional[Reservation]:
        return self.reservation_service.reserve(book, member, now)

    def cancel_reservation(self, reservation_id: int) -> bool:
        return self.reservation_service.cancel(reservation_id)

    def list_reservations_for_book(self, book: Book) -> List[Reservation]:
        return self.reservation_service.queue_for(book)

    def list_member_reservations(self, member: Member) -> List[Reservation]:
        return self.reservation_service.list_for_member(member)

    # ---- reporting
    def report_overdue(self, now: Optional[datetime] = None) -> List[Loan]:
        return self.circulation.list_overdue_loans(now)
