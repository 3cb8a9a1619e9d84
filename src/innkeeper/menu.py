"""
Interactive text menu over a hotel session
"""

import logging
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from .formatter import HotelFormatter
from .session import HotelSession
from .validators import (
    ValidationResult,
    validate_email,
    validate_national_id,
    validate_phone,
    validate_room_number,
    validate_text,
)
from .exceptions import (
    CustomerNotFoundError,
    DuplicateIdentifierError,
    InnkeeperError,
    InvalidCredentialsError,
    StorageError,
)

logger = logging.getLogger(__name__)

MAIN_MENU = """
===== Welcome to the Hotel Booking System =====
1. Admin Login
2. User Login
3. Register as User
4. Exit"""

ADMIN_MENU = """
=== Admin Menu ===
1. View Customer Details
2. View Customer Bookings
3. Generate Occupancy Report
4. Generate Popular Room Types Report
5. Checkout Room
6. Logout"""

USER_MENU = """
=== User Menu ===
1. View Available Rooms
2. Book Room
3. Cancel Booking
4. View Loyalty Points
5. Logout"""


class HotelMenu:
    """
    Drives the admin, user and registration flows until the user exits
    """

    def __init__(
        self,
        session: HotelSession,
        console: Optional[Console] = None,
        formatter: Optional[HotelFormatter] = None
    ):
        self.session = session
        self.console = console or Console()
        self.formatter = formatter or HotelFormatter(self.console)

    def run(self) -> None:
        actions = {
            "1": self.admin_login,
            "2": self.user_login,
            "3": self.register,
        }
        while True:
            self.console.print(MAIN_MENU, markup=False)
            choice = self._choice()
            if choice == "4":
                self.console.print("Exiting the system. Goodbye!")
                return
            self._dispatch(actions, choice)

    def admin_login(self) -> None:
        self.console.print("==== Admin Login ====")
        username = typer.prompt("Enter admin username")
        password = typer.prompt("Enter admin password", hide_input=True)

        config = self.session.config
        if username == config.admin_username and password == config.admin_password:
            self.console.print("[green]Admin login successful![/green]")
            self.admin_menu()
        else:
            self.console.print("[red]Incorrect admin credentials. Access denied.[/red]")

    def user_login(self) -> None:
        self.console.print("=== User Login ===")
        username = typer.prompt("Enter username")
        password = typer.prompt("Enter password", hide_input=True)

        try:
            customer = self.session.authenticate(username, password)
        except CustomerNotFoundError:
            self.console.print("[red]Username not found. Please register first.[/red]")
            return
        except InvalidCredentialsError:
            self.console.print("[red]Incorrect password. Please try again.[/red]")
            return

        self.console.print(f"[green]Login successful! Welcome, {escape(customer.name)}![/green]")
        self.user_menu(customer.username)

    def register(self) -> None:
        self.console.print("=== User Registration ===")
        username = self._prompt_valid("Enter username", lambda value: validate_text(value, "Username"))
        if username in self.session.engine.directory:
            self.console.print("[red]Username already exists. Please choose a different username.[/red]")
            return

        password = self._prompt_valid(
            "Enter password",
            lambda value: validate_text(value, "Password"),
            hide_input=True
        )
        name = self._prompt_valid("Enter your full name", lambda value: validate_text(value, "Name"))
        email = self._prompt_valid("Enter your email", validate_email)
        phone = self._prompt_valid("Enter your phone number (10 digits)", validate_phone)
        national_id = self._prompt_valid("Enter your national ID number (12 digits)", validate_national_id)

        try:
            self.session.register(username, name, email, phone, national_id, password)
        except DuplicateIdentifierError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        except StorageError as e:
            self._storage_warning(e)
            return

        self.console.print("[green]Registration successful![/green]")

    def admin_menu(self) -> None:
        actions = {
            "1": self.view_customers,
            "2": self.view_bookings,
            "3": self.occupancy_report,
            "4": self.popular_room_types_report,
            "5": self.checkout_room,
        }
        while True:
            self.console.print(ADMIN_MENU, markup=False)
            choice = self._choice()
            if choice == "6":
                self.console.print("Logging out from admin account...")
                return
            self._dispatch(actions, choice)

    def user_menu(self, username: str) -> None:
        actions = {
            "1": self.view_available_rooms,
            "2": lambda: self.book_room(username),
            "3": lambda: self.cancel_booking(username),
            "4": lambda: self.view_points(username),
        }
        while True:
            self.console.print(USER_MENU, markup=False)
            choice = self._choice()
            if choice == "5":
                self.console.print("Logging out...")
                return
            self._dispatch(actions, choice)

    def view_available_rooms(self) -> None:
        self.console.print(self.formatter.format_available_rooms(self.session.engine))

    def book_room(self, username: str) -> None:
        self.view_available_rooms()
        room_number = self._prompt_existing_room()

        try:
            receipt = self.session.book(room_number, username)
        except StorageError as e:
            self._storage_warning(e)
            return
        except InnkeeperError as e:
            self.console.print(f"[red]{escape(str(e))}.[/red]")
            return

        self.console.print(
            f"[green]Room {receipt.room_number} booked successfully! "
            f"You earned {receipt.points} loyalty points.[/green]"
        )

    def cancel_booking(self, username: str) -> None:
        rooms = self.session.engine.bookings_for(username)
        if not rooms:
            self.console.print("You have no bookings to cancel.")
            return

        self.console.print(self.formatter.format_customer_rooms(rooms))
        room_number = self._prompt_valid("Enter room number to cancel booking", validate_room_number)

        try:
            receipt = self.session.cancel(room_number, username)
        except StorageError as e:
            self._storage_warning(e)
            return
        except InnkeeperError:
            self.console.print(f"[red]You do not have a booking for room {room_number}.[/red]")
            return

        self.console.print(
            f"[green]Booking for room {receipt.room_number} has been canceled. "
            f"You lost {receipt.points} loyalty points.[/green]"
        )

    def view_points(self, username: str) -> None:
        customer = self.session.engine.directory.get(username)
        self.console.print(self.formatter.format_loyalty(customer))

    def view_customers(self) -> None:
        self.console.print(self.formatter.format_customers(self.session.engine.directory))

    def view_bookings(self) -> None:
        self.console.print(self.formatter.format_bookings(self.session.engine))

    def occupancy_report(self) -> None:
        try:
            report = self.session.occupancy()
        except InnkeeperError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        self.console.print(self.formatter.format_occupancy(report))

    def popular_room_types_report(self) -> None:
        self.console.print(self.formatter.format_popularity(self.session.popular_room_types()))

    def checkout_room(self) -> None:
        room_number = self._prompt_valid("Enter room number to checkout (e.g., 101)", validate_room_number)

        try:
            receipt = self.session.checkout(room_number)
        except StorageError as e:
            self._storage_warning(e)
            return
        except InnkeeperError as e:
            self.console.print(f"[red]{escape(str(e))}.[/red]")
            return

        if receipt.username:
            self.console.print(
                f"[green]Room {receipt.room_number} has been checked out by user "
                f"'{escape(receipt.username)}' and is now available.[/green]"
            )
        else:
            self.console.print(
                f"[yellow]Room {receipt.room_number} was booked but no booking record found. "
                f"It is now available.[/yellow]"
            )

    def _choice(self) -> str:
        return typer.prompt("Enter your choice").strip()

    def _dispatch(self, actions: dict, choice: str) -> None:
        action = actions.get(choice)
        if action is None:
            self.console.print("[yellow]Invalid choice. Please try again.[/yellow]")
            return
        action()

    def _prompt_valid(
        self,
        text: str,
        validator: Callable[[str], ValidationResult],
        hide_input: bool = False
    ):
        """
        Prompt until the validator accepts the input
        Returns the validated value
        """
        while True:
            result = validator(typer.prompt(text, hide_input=hide_input))
            if result.ok:
                return result.value
            self.console.print(f"[yellow]{escape(result.error)}[/yellow]")

    def _prompt_existing_room(self) -> int:
        while True:
            room_number = self._prompt_valid("Enter room number", validate_room_number)
            if room_number in self.session.engine.catalog:
                return room_number
            self.console.print(f"[yellow]Room number {room_number} does not exist. Please try again.[/yellow]")

    def _storage_warning(self, error: StorageError) -> None:
        logger.error(f"Storage error: {error}")
        self.console.print(
            "[yellow]Warning: the change was applied but could not be saved. "
            "It will be written on the next successful save.[/yellow]"
        )
