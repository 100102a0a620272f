"""
models/user.py
--------------
Domain model for application users (guests and property owners).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    A registered user.

    Attributes:
        name: Display name.
        email: Lowercased email address, the unique lookup key.
        password: Credential hash. Hashing happens before it reaches this layer.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    def __post_init__(self):
        self.email = normalize_email(self.email)

    @classmethod
    def from_row(cls, row: dict) -> "User":
        """Build a User from a RealDictCursor row."""
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email}>"


def normalize_email(email: str) -> str:
    return email.strip().lower()
