"""
models/user.py
--------------
Domain model for LightBnB users (guests and property owners).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """
    Represents a registered user.

    Attributes:
        id: Database primary key (None for new records).
        name: Display name.
        email: Unique login email.
        password: Credential as handed over by the caller (expected pre-hashed).
        created_at: Timestamp when the record was created.
    """
    name: str
    email: str
    password: str = field(repr=False)
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
