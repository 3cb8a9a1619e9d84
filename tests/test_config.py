"""
Tests for configuration
"""

from pathlib import Path

from innkeeper.config import HotelConfig


class TestHotelConfig:
    """Test cases for HotelConfig"""

    def test_defaults(self, monkeypatch):
        """Test default store locations and admin credentials"""
        monkeypatch.delenv("INNKEEPER_DATA_DIR", raising=False)
        monkeypatch.delenv("INNKEEPER_ADMIN_USERNAME", raising=False)
        monkeypatch.delenv("INNKEEPER_ADMIN_PASSWORD", raising=False)

        config = HotelConfig.from_env()

        assert config.customers_path == Path(".") / "customers.txt"
        assert config.rooms_path == Path(".") / "rooms.txt"
        assert config.bookings_path == Path(".") / "bookings.txt"
        assert config.admin_username == "admin"
        assert config.admin_password == "adminpass"

    def test_environment(self, monkeypatch, tmp_path):
        """Test INNKEEPER_* variables are honoured"""
        monkeypatch.setenv("INNKEEPER_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("INNKEEPER_ADMIN_USERNAME", "manager")
        monkeypatch.setenv("INNKEEPER_ADMIN_PASSWORD", "secret")

        config = HotelConfig.from_env()

        assert config.bookings_path == tmp_path / "bookings.txt"
        assert config.admin_username == "manager"
        assert config.admin_password == "secret"

    def test_explicit_data_dir_wins(self, monkeypatch, tmp_path):
        """Test an explicit directory overrides the environment"""
        monkeypatch.setenv("INNKEEPER_DATA_DIR", "/somewhere/else")
        config = HotelConfig.from_env(tmp_path)
        assert config.data_dir == tmp_path
