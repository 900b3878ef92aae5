"""
Lending policy knobs for the catalog.

Everything is in-process; there is no config file or environment lookup.
"""

from __future__ import annotations
from dataclasses import dataclass

DEFAULT_LOAN_DAYS = 14
DEFAULT_EXTENSION_DAYS = 7
DEFAULT_MAX_BOOKS = 3
FLAT_FINE = 5.0


@dataclass(frozen=True)
class LoanPolicy:
    loan_days: int = DEFAULT_LOAN_DAYS
    extension_days: int = DEFAULT_EXTENSION_DAYS
    max_books_allowed: int = DEFAULT_MAX_BOOKS
    flat_fine: float = FLAT_FINE

    def __post_init__(self) -> None:
        if self.loan_days <= 0:
            raise ValueError(f"loan_days must be positive, got {self.loan_days}")
        if self.extension_days <= 0:
            raise ValueError(f"extension_days must be positive, got {self.extension_days}")
        if self.max_books_allowed <= 0:
            raise ValueError(f"max_books_allowed must be positive, got {self.max_books_allowed}")


DEFAULT_POLICY = LoanPolicy()
