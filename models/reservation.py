"""
models/reservation.py
---------------------
Domain model for a guest's stay at a property.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from models.property import Property
from utils.money import format_cents


@dataclass
class Reservation:
    """
    Represents a reservation.

    Attributes:
        id: Database primary key (None for new records).
        property_id: Reserved property.
        guest_id: Reserving user.
        start_date: First night.
        end_date: Checkout day (exclusive).
        total_cost: Total price in integer cents.
        listing: The reserved Property, attached by listing queries.
        created_at: Timestamp when the record was created.
    """
    property_id: int
    guest_id: int
    start_date: date
    end_date: date
    total_cost: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    listing: Optional[Property] = None

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days

    def __str__(self) -> str:
        title = self.listing.title if self.listing else f"property #{self.property_id}"
        return f"{title}: {self.start_date} → {self.end_date} ({format_cents(self.total_cost)})"
