from __future__ import annotations
import logging

from .api import Library
from .domain import Book, Member

logger = logging.getLogger(__name__)


def seed_demo_data(lib: Library) -> None:
    # books
    lib.add_book(
        Book(book_id="bk_csharp01", title="C# Programming", author="John Doe", publisher="Tech Books")
    )
    lib.add_book(
        Book(book_id="bk_dstruct1", title="Data Structures", author="Jane Smith", publisher="Study Press")
    )

    # members
    lib.register_member(Member(member_id=1, name="Alice"))
    lib.register_member(Member(member_id=2, name="Bob"))
    lib.register_member(Member.librarian(3, "Carol", position="Head Librarian", course="Cataloguing"))

    logger.info("[seed] books: %s", [b.title for b in lib.list_all_books()])
    logger.info("[seed] members: %s", [m.name for m in lib.members.list_all()])
