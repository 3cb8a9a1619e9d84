"""
Tests for the hotel session and write-through persistence
"""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from innkeeper.config import HotelConfig
from innkeeper.session import HotelSession
from innkeeper.exceptions import RoomAlreadyBookedError, StorageError


class TestHotelSession:
    """Test cases for HotelSession class"""

    def setup_method(self):
        """Set up test fixtures"""
        self.temp_dir = tempfile.mkdtemp(prefix="innkeeper_session_")
        self.config = HotelConfig(data_dir=Path(self.temp_dir))

    def teardown_method(self):
        """Clean up test fixtures"""
        if Path(self.temp_dir).exists():
            shutil.rmtree(self.temp_dir)

    def _register(self, session, username, password="pw"):
        return session.register(
            username, username.title(), f"{username}@example.com", "1234567890", "123456789012", password
        )

    def test_first_run_writes_default_rooms(self):
        """Test a fresh directory gets the default room layout on disk"""
        session = HotelSession.open(self.config)

        assert len(session.engine.catalog) == 15
        lines = self.config.rooms_path.read_text().splitlines()
        assert lines[0] == "101,0,Standard"
        assert lines[-1] == "503,0,Suite"

    def test_register_writes_customers(self):
        """Test registration is written through immediately"""
        session = HotelSession.open(self.config)
        self._register(session, "alice", "p1")

        assert self.config.customers_path.read_text() == (
            "alice,Alice,alice@example.com,1234567890,123456789012,p1,0\n"
        )

    def test_book_writes_all_stores(self):
        """Test a booking updates every store before the session closes"""
        session = HotelSession.open(self.config)
        self._register(session, "alice")
        session.book(101, "alice")

        assert "101,alice" in self.config.bookings_path.read_text()
        assert "101,1,Standard" in self.config.rooms_path.read_text()
        assert self.config.customers_path.read_text().rstrip().endswith(",300")

    def test_checkout_keeps_points_on_disk(self):
        """Test checkout rewrites rooms and bookings only"""
        session = HotelSession.open(self.config)
        self._register(session, "bob")
        session.book(202, "bob")
        session.checkout(202)

        reloaded = HotelSession.open(self.config)
        assert not reloaded.engine.catalog.get(202).booked
        assert 202 not in reloaded.engine.ledger
        assert reloaded.engine.directory.get("bob").points == 500

    def test_reload_reproduces_state(self):
        """Test closing and reopening gives the same bookings and points"""
        with HotelSession.open(self.config) as session:
            self._register(session, "alice")
            self._register(session, "bob")
            session.book(101, "alice")
            session.book(203, "bob")
            session.book(302, "alice")
            session.cancel(101, "alice")

        reloaded = HotelSession.open(self.config)
        engine = reloaded.engine

        assert engine.catalog.booked_numbers() == [203, 302]
        assert engine.ledger.occupant(203) == "bob"
        assert engine.directory.get("alice").points == 500
        assert engine.directory.get("bob").points == 800
        assert engine.check_invariants() == []

    def test_failed_booking_writes_nothing(self):
        """Test a rejected booking leaves the stores alone"""
        session = HotelSession.open(self.config)
        self._register(session, "alice")
        self._register(session, "bob")
        session.book(101, "alice")
        before = self.config.bookings_path.read_text()

        with patch.object(session, "flush") as mock_flush:
            with pytest.raises(RoomAlreadyBookedError):
                session.book(101, "bob")
            mock_flush.assert_not_called()

        assert self.config.bookings_path.read_text() == before

    def test_storage_error_keeps_memory_state(self):
        """Test a failed write does not undo the in-memory booking"""
        session = HotelSession.open(self.config)
        self._register(session, "alice")

        with patch.object(session.store, "save_bookings", side_effect=StorageError("read-only")):
            with pytest.raises(StorageError):
                session.book(102, "alice")

        assert session.engine.ledger.occupant(102) == "alice"
        assert session.engine.directory.get("alice").points == 500

        session.close()
        assert "102,alice" in self.config.bookings_path.read_text()

    def test_interrupted_flush_leaves_ledger_written(self):
        """Test bookings and rooms are on disk before customers are rewritten"""
        session = HotelSession.open(self.config)
        self._register(session, "alice")

        with patch.object(session.store, "save_customers", side_effect=StorageError("disk full")):
            with pytest.raises(StorageError):
                session.book(101, "alice")

        assert "101,alice" in self.config.bookings_path.read_text()
        assert "101,1,Standard" in self.config.rooms_path.read_text()
        assert self.config.customers_path.read_text().rstrip().endswith(",0")

        reloaded = HotelSession.open(self.config)
        assert reloaded.engine.ledger.occupant(101) == "alice"
        assert reloaded.engine.check_invariants() == []

    def test_inconsistent_snapshot_is_repaired(self):
        """Test load reconciles rooms against bookings"""
        self.config.customers_path.write_text("alice,Alice,a@example.com,1234567890,123456789012,p1,300\n")
        self.config.rooms_path.write_text("101,0,Standard\n102,1,Deluxe\n103,0,Suite\n")
        self.config.bookings_path.write_text("101,alice\n")

        session = HotelSession.open(self.config)

        assert session.engine.catalog.booked_numbers() == [101]
        assert session.engine.check_invariants() == []

    def test_reports(self):
        """Test reports through the session"""
        session = HotelSession.open(self.config)
        self._register(session, "alice")
        session.book(103, "alice")

        assert session.occupancy().booked_rooms == 1
        assert session.popular_room_types()[0].type_name == "Suite"
