"""Accounts of the rental system: administrators and customers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class User:
    """An account that can log in to the rental system."""

    name: str
    password: str = field(repr=False)
    user_id: int

    is_admin: ClassVar[bool] = False

    def check_name(self, username: str) -> bool:
        """True if the given name is this user's name."""
        return self.name == username

    def check_password(self, password: str) -> bool:
        """True if the given password is this user's password."""
        return self.password == password


@dataclass
class Admin(User):
    """An administrator who manages the bike inventory."""

    is_admin: ClassVar[bool] = True


@dataclass
class Customer(User):
    """A customer who rents bikes and keeps a list of them."""

    rented_bike_ids: list[int] = field(default_factory=list)

    def add_rental(self, bike_id: int) -> None:
        """Record that the customer rented this bike."""
        self.rented_bike_ids.append(bike_id)

    def remove_rental(self, bike_id: int) -> None:
        """Forget one rental of this bike, if there is one."""
        if bike_id in self.rented_bike_ids:
            self.rented_bike_ids.remove(bike_id)

    def has_rental(self, bike_id: int) -> bool:
        """True if the customer currently rents this bike."""
        return bike_id in self.rented_bike_ids