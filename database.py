"""
database.py
-----------
Public data-access functions for the LightBnB application.

Every function runs one parameterized statement through a repository.
When the driver rejects a statement, or the caller's values cannot be
turned into query parameters, the error is logged and a sentinel is
returned instead: None for single-record functions, [] for listings.
"""

from typing import Any, Mapping, Optional, Union

import psycopg2

from models.property import Property
from models.reservation import Reservation
from models.user import User
from repositories.property_filters import SearchOptions
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)

# Driver rejections plus the errors raised while coercing caller input
# (missing mapping keys, unknown fields, non-numeric filters).
REJECTED_ERRORS = (psycopg2.Error, ValueError, TypeError, KeyError)

_users = UserRepository()
_properties = PropertyRepository()
_reservations = ReservationRepository()


def _log_failure(func_name: str, error: Exception) -> None:
    message = getattr(error, "pgerror", None) or str(error)
    logger.error(f"Error in {func_name}: {message.strip()}")


# ── Users ─────────────────────────────────────────────────

def get_user_with_email(email: str) -> Optional[User]:
    """Get the user registered with ``email``, or None."""
    try:
        return _users.get_by_email(email)
    except REJECTED_ERRORS as e:
        _log_failure("get_user_with_email", e)
        return None


def get_user_with_id(user_id: int) -> Optional[User]:
    """Get the user with primary key ``user_id``, or None."""
    try:
        return _users.get_by_id(user_id)
    except REJECTED_ERRORS as e:
        _log_failure("get_user_with_id", e)
        return None


def add_user(user: Union[User, Mapping[str, Any]]) -> Optional[User]:
    """
    Register a new user.

    Args:
        user: A User, or a mapping with name, email and password.

    Returns:
        The stored User, or None if the database rejected it
        (for example a duplicate email) or a field was missing.
    """
    try:
        if not isinstance(user, User):
            user = User(name=user["name"], email=user["email"], password=user["password"])
        return _users.add(user)
    except REJECTED_ERRORS as e:
        _log_failure("add_user", e)
        return None


# ── Properties ────────────────────────────────────────────

def get_all_properties(
    options: SearchOptions = None, limit: Union[int, str] = 10
) -> list[Property]:
    """
    Search properties, cheapest first.

    Args:
        options: PropertySearchOptions or a mapping with any of city, owner_id,
            minimum_price_per_night, maximum_price_per_night (dollars) and
            minimum_rating.
        limit: Maximum number of properties to return. Numeric strings are accepted.
    """
    try:
        return _properties.search(options, limit)
    except REJECTED_ERRORS as e:
        _log_failure("get_all_properties", e)
        return []


def add_property(prop: Union[Property, Mapping[str, Any]]) -> Optional[Property]:
    """
    Create a property listing.

    Args:
        prop: A Property, or a mapping of Property fields
            (``cost_per_night`` in cents).

    Returns:
        The stored Property, or None if the database rejected it.
    """
    try:
        if not isinstance(prop, Property):
            prop = Property(**prop)
        return _properties.add(prop)
    except REJECTED_ERRORS as e:
        _log_failure("add_property", e)
        return None


# ── Reservations ──────────────────────────────────────────

def get_all_reservations(guest_id: int, limit: Union[int, str] = 10) -> list[Reservation]:
    """Get a guest's reservations, earliest first, each with its property."""
    try:
        return _reservations.get_for_guest(guest_id, limit)
    except REJECTED_ERRORS as e:
        _log_failure("get_all_reservations", e)
        return []


def add_reservation(
    reservation: Union[Reservation, Mapping[str, Any]]
) -> Optional[Reservation]:
    """
    Book a property.

    Args:
        reservation: A Reservation, or a mapping of Reservation fields
            (``total_cost`` in cents).

    Returns:
        The stored Reservation, or None if the database rejected it.
    """
    try:
        if not isinstance(reservation, Reservation):
            reservation = Reservation(**reservation)
        return _reservations.add(reservation)
    except REJECTED_ERRORS as e:
        _log_failure("add_reservation", e)
        return None
