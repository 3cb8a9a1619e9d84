"""
Customer directory and the loyalty tier program
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator

from .exceptions import (
    CustomerNotFoundError,
    DuplicateIdentifierError,
    InvalidCredentialsError,
)

logger = logging.getLogger(__name__)


class LoyaltyTier(Enum):
    """Loyalty tiers, lowest first"""
    REGULAR = "Regular"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"


# Minimum points for each tier, checked from the top down
TIER_THRESHOLDS = [
    (1000, LoyaltyTier.PLATINUM),
    (500, LoyaltyTier.GOLD),
    (200, LoyaltyTier.SILVER),
]


def tier_for_points(points: int) -> LoyaltyTier:
    """Map a points balance to its loyalty tier"""
    for threshold, tier in TIER_THRESHOLDS:
        if points >= threshold:
            return tier
    return LoyaltyTier.REGULAR


@dataclass
class Customer:
    """
    A registered customer

    Attributes:
        username: unique login identifier (case-sensitive)
        name: full name
        email: email address
        phone: 10-digit phone number
        national_id: 12-digit national identity number
        password: stored and compared verbatim
        points: loyalty points balance, never negative
    """
    username: str
    name: str
    email: str
    phone: str
    national_id: str
    password: str
    points: int = 0

    @property
    def tier(self) -> LoyaltyTier:
        return tier_for_points(self.points)


class CustomerDirectory:
    """
    Registered customers keyed by username
    """

    def __init__(self):
        self._customers: Dict[str, Customer] = {}

    def register(
        self,
        username: str,
        name: str,
        email: str,
        phone: str,
        national_id: str,
        password: str
    ) -> Customer:
        """
        Create a new customer with zero points
        Raises DuplicateIdentifierError if the username is taken
        """
        if username in self._customers:
            raise DuplicateIdentifierError(username)

        customer = Customer(username, name, email, phone, national_id, password)
        self._customers[username] = customer
        logger.debug(f"Registered customer '{username}'")
        return customer

    def restore(self, customer: Customer) -> None:
        """Add a customer rebuilt from persisted records"""
        if customer.username in self._customers:
            logger.warning(f"Duplicate customer record for '{customer.username}', keeping the last one")
        customer.points = max(0, customer.points)
        self._customers[customer.username] = customer

    def get(self, username: str) -> Customer:
        try:
            return self._customers[username]
        except KeyError:
            raise CustomerNotFoundError(username)

    def authenticate(self, username: str, password: str) -> Customer:
        """
        Check a username/password pair
        Raises CustomerNotFoundError or InvalidCredentialsError
        """
        customer = self.get(username)
        if customer.password != password:
            raise InvalidCredentialsError("Incorrect password")
        return customer

    def adjust_points(self, username: str, delta: int) -> int:
        """
        Apply a points delta, never dropping below zero
        Returns the new balance
        """
        customer = self.get(username)
        customer.points = max(0, customer.points + delta)
        return customer.points

    def __iter__(self) -> Iterator[Customer]:
        for username in sorted(self._customers):
            yield self._customers[username]

    def __contains__(self, username: str) -> bool:
        return username in self._customers

    def __len__(self) -> int:
        return len(self._customers)
