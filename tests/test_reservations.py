from datetime import timedelta

from libcatalog import ReservationStatus


def test_reserve_and_queue_order(lib, book1, alice, bob, now):
    r_bob = lib.reserve_book(book1, bob, now + timedelta(minutes=5))
    r_alice = lib.reserve_book(book1, alice, now)
    assert (r_bob.reservation_id, r_alice.reservation_id) == (1, 2)
    assert lib.list_reservations_for_book(book1) == [r_alice, r_bob]


def test_duplicate_active_reservation_rejected(lib, book1, alice, now):
    assert lib.reserve_book(book1, alice, now) is not None
    assert lib.reserve_book(book1, alice, now) is None


def test_cancel_reservation(lib, book1, alice, now):
    r = lib.reserve_book(book1, alice, now)
    assert lib.cancel_reservation(r.reservation_id)
    assert r.status == ReservationStatus.CANCELLED
    assert not lib.cancel_reservation(r.reservation_id)
    assert not lib.cancel_reservation(99)
    assert lib.list_reservations_for_book(book1) == []
    # a new one can be placed after cancelling
    assert lib.reserve_book(book1, alice, now) is not None


def test_borrow_fulfils_own_reservation(lib, book1, alice, bob, now):
    lib.borrow_book(book1, bob, now)
    r = lib.reserve_book(book1, alice, now)
    assert lib.return_book(book1, bob, now + timedelta(days=1))
    assert r.status == ReservationStatus.ACTIVE

    assert lib.borrow_book(book1, alice, now + timedelta(days=2)) is not None
    assert r.status == ReservationStatus.FULFILLED
    assert lib.list_reservations_for_book(book1) == []


def test_reservation_does_not_block_other_borrowers(lib, book1, alice, bob, now):
    r = lib.reserve_book(book1, alice, now)
    assert lib.borrow_book(book1, bob, now) is not None
    assert r.status == ReservationStatus.ACTIVE


def test_list_member_reservations(lib, book1, book2, alice, bob, now):
    first = lib.reserve_book(book1, alice, now)
    lib.reserve_book(book1, bob, now)
    second = lib.reserve_book(book2, alice, now)
    lib.cancel_reservation(first.reservation_id)
    assert lib.list_member_reservations(alice) == [first, second]
    assert first.status == ReservationStatus.CANCELLED
