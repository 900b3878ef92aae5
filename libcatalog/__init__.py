"""
libcatalog package.

Exports key modules for convenient imports.
"""

from .config import LoanPolicy, DEFAULT_POLICY

from .domain import (
    Role,
    Book,
    Member,
    Loan,
    ReservationStatus,
    Reservation,
)

from .repositories import (
    BookRepo,
    MemberRepo,
    LoanRepo,
    ReservationRepo,
)

from .services import (
    CatalogService,
    MemberService,
    ReservationService,
    CirculationService,
)

from .api import Library
from .seed import seed_demo_data

__all__ = [
    # config
    "LoanPolicy",
    "DEFAULT_POLICY",
    # domain
    "Role",
    "Book",
    "Member",
    "Loan",
    "ReservationStatus",
    "Reservation",
    # repos
    "BookRepo",
    "MemberRepo",
    "LoanRepo",
    "ReservationRepo",
    # services
    "CatalogService",
    "MemberService",
    "ReservationService",
    "CirculationService",
    # api
    "Library",
    # seed
    "seed_demo_data",
]
