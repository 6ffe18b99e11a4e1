"""
models/property.py
------------------
Domain model for rental listings.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from utils.money import format_cents


@dataclass
class Property:
    """
    Represents a property listed for short-term rental.

    Attributes:
        id: Database primary key (None for new records).
        owner_id: ID of the owning user.
        title: Listing headline.
        description: Free-text description.
        cost_per_night: Nightly price in integer cents.
        parking_spaces / number_of_bathrooms / number_of_bedrooms: Counts.
        country, street, city, province, post_code: Address fields.
        thumbnail_photo_url / cover_photo_url: Optional image URLs.
        active: Whether the listing is visible.
        average_rating: Mean review rating, filled in by search queries only.
        created_at: Timestamp when the record was created.
    """
    owner_id: int
    title: str
    cost_per_night: int
    country: str
    street: str
    city: str
    post_code: str
    description: str = ""
    province: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    average_rating: Optional[float] = None

    def __str__(self) -> str:
        rating = f"{self.average_rating:.1f}★" if self.average_rating is not None else "unrated"
        return f"{self.title} | {self.city} | {format_cents(self.cost_per_night)}/night | {rating}"
