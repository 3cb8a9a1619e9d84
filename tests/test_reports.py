"""
Tests for occupancy and popularity reports
"""

import pytest

from innkeeper.engine import BookingEngine
from innkeeper.formatter import HotelFormatter
from innkeeper.reports import OccupancyReport, occupancy_report, popular_room_types_report
from innkeeper.exceptions import InvalidStateError


class TestReports:
    """Test cases for report generation"""

    def setup_method(self):
        """Set up test fixtures"""
        self.engine = BookingEngine()
        self.engine.catalog.initialize()
        self.engine.register("alice", "Alice", "alice@example.com", "1234567890", "123456789012", "p1")
        self.engine.register("bob", "Bob", "bob@example.com", "0987654321", "210987654321", "p2")

    def test_occupancy_with_three_bookings(self):
        """Test 3 of 15 rooms booked"""
        self.engine.book(101, "alice")
        self.engine.book(202, "bob")
        self.engine.book(303, "alice")

        report = occupancy_report(self.engine)

        assert report.total_rooms == 15
        assert report.booked_rooms == 3
        assert report.available_rooms == 12
        assert report.occupancy_rate == 20.0

        text = HotelFormatter().format_plain_occupancy(report)
        assert "Available Rooms: 12" in text
        assert "Occupancy Rate: 20.00%" in text

    def test_occupancy_rate_rounding(self):
        """Test the rate is kept to two decimals"""
        report = OccupancyReport(total_rooms=15, booked_rooms=1)
        assert report.occupancy_rate == 6.67

    def test_occupancy_empty_catalog(self):
        """Test an empty catalog is rejected instead of dividing by zero"""
        with pytest.raises(InvalidStateError):
            occupancy_report(BookingEngine())

    def test_popular_room_types(self):
        """Test counts are sorted by popularity"""
        self.engine.book(103, "alice")
        self.engine.book(203, "bob")
        self.engine.book(102, "alice")

        ranking = popular_room_types_report(self.engine)

        assert [(entry.type_name, entry.bookings) for entry in ranking] == [("Suite", 2), ("Deluxe", 1)]

    def test_popular_room_types_ties_by_name(self):
        """Test ties are ordered by type name"""
        self.engine.book(103, "alice")
        self.engine.book(101, "bob")
        self.engine.book(102, "alice")

        ranking = popular_room_types_report(self.engine)

        assert [entry.type_name for entry in ranking] == ["Deluxe", "Standard", "Suite"]

    def test_popular_room_types_empty(self):
        """Test no bookings gives an empty ranking"""
        assert popular_room_types_report(self.engine) == []
