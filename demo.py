from __future__ import annotations
import logging

from libcatalog import Library, seed_demo_data


def demo_flow() -> None:
    lib = Library(name="Central Library", address="123 Main St")
    seed_demo_data(lib)

    alice = lib.find_member_by_id(1)
    if alice is None:
        print("Member 1 is not registered.")
        return
    book1 = lib.search_by_title("C# Programming")[0]

    # Borrow
    print("Borrowing a book...")
    if lib.borrow_book(book1, alice):
        print(f"Book '{book1.title}' borrowed by {alice.name}.")

    # Search
    print("Books found by title 'C#':")
    for b in lib.search_by_title("C#"):
        print(f"- {b.title} by {b.author}")

    # Return
    print("\nReturning the book...")
    if lib.return_book(book1, alice):
        print(f"Book '{book1.title}' returned by {alice.name}.")

    # Borrowed books (should be empty)
    print("\nBorrowed books:")
    for b in alice.list_books_borrowed():
        print(f"- {b.title}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    demo_flow()
