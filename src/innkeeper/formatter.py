"""
Rich text formatter for room listings, customer tables and reports
"""

from typing import Iterable, List, Optional
from rich.text import Text
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table

from .customers import Customer, LoyaltyTier
from .engine import BookingEngine
from .ledger import Booking
from .reports import OccupancyReport, RoomTypePopularity
from .rooms import Room, RoomType


class HotelFormatter:
    """
    Formatter for hotel listings and reports
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

        self.tier_colors = {
            LoyaltyTier.REGULAR: "white",
            LoyaltyTier.SILVER: "bright_white",
            LoyaltyTier.GOLD: "yellow",
            LoyaltyTier.PLATINUM: "bold cyan"
        }

        self.type_colors = {
            RoomType.STANDARD: "white",
            RoomType.DELUXE: "green",
            RoomType.SUITE: "magenta"
        }

    def format_available_rooms(self, engine: BookingEngine) -> Group:
        """
        One table per floor listing the rooms that can still be booked
        """
        tables = []
        for floor, rooms in engine.catalog.list_available():
            tables.append(self._format_floor(floor, rooms))

        if not tables:
            return Group(Text("No rooms available.", style="yellow"))

        return Group(*tables)

    def _format_floor(self, floor: int, rooms: List[Room]) -> Table:
        table = Table(title=f"--- Floor {floor} ---", title_justify="left", header_style="bold")
        table.add_column("Room No", justify="right")
        table.add_column("Type")
        table.add_column("Price", justify="right")

        for room in rooms:
            color = self.type_colors[room.room_type]
            table.add_row(str(room.number), Text(room.room_type.value, style=color), f"₹{room.price}")

        return table

    def format_customer_rooms(self, rooms: Iterable[Room]) -> Table:
        """Rooms held by a single customer"""
        table = Table(title="Your Booked Rooms", title_justify="left", header_style="bold")
        table.add_column("Room No", justify="right")
        table.add_column("Type")

        for room in rooms:
            table.add_row(str(room.number), room.room_type.value)

        return table

    def format_customers(self, customers: Iterable[Customer]) -> Table:
        table = Table(header_style="bold", show_lines=False)
        for column in ("Username", "Name", "Email", "Phone", "National ID"):
            table.add_column(column, overflow="fold")
        table.add_column("Points", justify="right")
        table.add_column("Tier")

        for customer in customers:
            table.add_row(
                Text(customer.username),
                Text(customer.name),
                Text(customer.email),
                customer.phone,
                customer.national_id,
                str(customer.points),
                self.format_tier(customer.tier)
            )

        return table

    def format_bookings(self, engine: BookingEngine) -> Group:
        """
        Every current booking with its occupant and room type
        """
        bookings: List[Booking] = list(engine.ledger)
        if not bookings:
            return Group(Text("No current bookings.", style="yellow"))

        table = Table(header_style="bold")
        table.add_column("Room No", justify="right")
        table.add_column("Username")
        table.add_column("Type")

        for booking in bookings:
            if booking.room_number in engine.catalog:
                type_name = engine.catalog.get(booking.room_number).room_type.value
            else:
                type_name = "Unknown"
            table.add_row(str(booking.room_number), Text(booking.username), type_name)

        return Group(table)

    def format_loyalty(self, customer: Customer) -> Text:
        text = Text()
        text.append(f"Loyalty Points: {customer.points}\n", style="bold")
        text.append("Tier: ")
        text.append(self.format_tier(customer.tier))
        return text

    def format_tier(self, tier: LoyaltyTier) -> Text:
        return Text(tier.value, style=self.tier_colors[tier])

    def format_occupancy(self, report: OccupancyReport) -> Panel:
        return Panel(
            Text(self.format_plain_occupancy(report)),
            title="[bold]Occupancy Report[/bold]",
            border_style="blue",
            expand=False
        )

    def format_popularity(self, ranking: List[RoomTypePopularity]) -> Panel:
        if not ranking:
            content = Text("No bookings yet.", style="yellow")
        else:
            content = Table(header_style="bold")
            content.add_column("Room Type", min_width=20)
            content.add_column("Bookings", justify="right")
            for entry in ranking:
                content.add_row(entry.type_name, str(entry.bookings))

        return Panel(
            content,
            title="[bold]Popular Room Types Report[/bold]",
            border_style="blue",
            expand=False
        )

    def format_plain_occupancy(self, report: OccupancyReport) -> str:
        """
        Occupancy report as plain text lines
        """
        lines = [
            f"Total Rooms: {report.total_rooms}",
            f"Booked Rooms: {report.booked_rooms}",
            f"Available Rooms: {report.available_rooms}",
            f"Occupancy Rate: {report.occupancy_rate:.2f}%",
        ]
        return "\n".join(lines)
