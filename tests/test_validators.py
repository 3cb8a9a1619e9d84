"""
Tests for input validation
"""

from innkeeper.validators import (
    validate_email,
    validate_national_id,
    validate_phone,
    validate_room_number,
    validate_text,
)


class TestValidators:
    """Test cases for menu input validators"""

    def test_email(self):
        """Test email acceptance and rejection"""
        assert validate_email("alice@example.com").ok
        assert validate_email("first.last+tag@mail.example.co").value == "first.last+tag@mail.example.co"

        result = validate_email("alice@example")
        assert not result.ok
        assert "Invalid email" in result.error

    def test_phone(self):
        """Test phone numbers need exactly 10 digits"""
        assert validate_phone("9876543210").value == "9876543210"
        assert not validate_phone("987654321").ok
        assert not validate_phone("98765432100").ok
        assert not validate_phone("98765x3210").ok

    def test_national_id(self):
        """Test national ids need exactly 12 digits"""
        assert validate_national_id("123412341234").ok
        assert not validate_national_id("1234 1234 1234").ok
        assert "12 digits" in validate_national_id("1").error

    def test_text(self):
        """Test free text cannot break the store format"""
        assert validate_text("Alice Smith", "Name").value == "Alice Smith"
        assert not validate_text("   ", "Name").ok
        assert "commas" in validate_text("Smith, Alice", "Name").error
        assert "line breaks" in validate_text("Alice\nSmith", "Name").error

    def test_room_number(self):
        """Test room numbers ignore whitespace"""
        assert validate_room_number(" 1 01 ").value == 101
        assert not validate_room_number("abc").ok
        assert not validate_room_number("-5").ok
