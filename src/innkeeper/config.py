"""
Runtime configuration
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

ENV_DATA_DIR = "INNKEEPER_DATA_DIR"
ENV_ADMIN_USERNAME = "INNKEEPER_ADMIN_USERNAME"
ENV_ADMIN_PASSWORD = "INNKEEPER_ADMIN_PASSWORD"


@dataclass
class HotelConfig:
    """
    Store locations and admin credentials for a session

    Attributes:
        data_dir: directory holding the three store files
        customers_file: file name of the customer store
        rooms_file: file name of the room store
        bookings_file: file name of the booking store
        admin_username: admin login (a placeholder, not a security boundary)
        admin_password: admin password
    """
    data_dir: Path = Path(".")
    customers_file: str = "customers.txt"
    rooms_file: str = "rooms.txt"
    bookings_file: str = "bookings.txt"
    admin_username: str = "admin"
    admin_password: str = "adminpass"

    @property
    def customers_path(self) -> Path:
        return self.data_dir / self.customers_file

    @property
    def rooms_path(self) -> Path:
        return self.data_dir / self.rooms_file

    @property
    def bookings_path(self) -> Path:
        return self.data_dir / self.bookings_file

    @classmethod
    def from_env(cls, data_dir: Optional[Path] = None) -> "HotelConfig":
        """
        Build a config from INNKEEPER_* environment variables
        An explicit data_dir wins over the environment
        """
        config = cls()
        env_dir = os.environ.get(ENV_DATA_DIR)
        if data_dir is not None:
            config.data_dir = Path(data_dir)
        elif env_dir:
            config.data_dir = Path(env_dir)

        config.admin_username = os.environ.get(ENV_ADMIN_USERNAME, config.admin_username)
        config.admin_password = os.environ.get(ENV_ADMIN_PASSWORD, config.admin_password)
        return config
