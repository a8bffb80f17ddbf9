"""Registration, login and persistence of user accounts."""

from __future__ import annotations

from pathlib import Path

from bikerental.users import Admin, Customer, User

DEFAULT_USERS_FILE = "users_data.txt"


class UserManagement:
    """The registered users of the rental system."""

    def __init__(self) -> None:
        self.users: list[User] = []

    def register_customer(self, name: str, password: str, user_id: int) -> Customer:
        """Register a customer; raises ValueError if the ID is taken."""
        if any(user.user_id == user_id for user in self.users):
            raise ValueError(f"UserID {user_id} already exists")
        customer = Customer(name, password, user_id)
        self.users.append(customer)
        return customer

    def register_admin(self, name: str, password: str, user_id: int) -> Admin:
        """Register an administrator."""
        admin = Admin(name, password, user_id)
        self.users.append(admin)
        return admin

    def login(self, name: str, password: str, user_id: int) -> User | None:
        """The user matching all three credentials, or None."""
        for user in self.users:
            if (
                user.user_id == user_id
                and user.check_password(password)
                and user.check_name(name)
            ):
                return user
        return None

    def save(self, path: str | Path = DEFAULT_USERS_FILE) -> None:
        """Write every customer and the bikes they rent to a file."""
        with open(path, "w", encoding="utf-8") as out:
            for user in self.users:
                if not isinstance(user, Customer):
                    continue
                rentals = "".join(f"{bike_id}," for bike_id in user.rented_bike_ids)
                out.write(f"{user.name},{user.password},{user.user_id},customer,{rentals}\n")

    def load(self, path: str | Path = DEFAULT_USERS_FILE) -> None:
        """Read customers written by save and register them again."""
        with open(path, encoding="utf-8") as source:
            for line in source:
                line = line.rstrip("\r\n")
                if not line:
                    continue
                parts = line.split(",")
                if len(parts) < 4 or parts[3] != "customer":
                    continue
                name, password, user_id = parts[0], parts[1], int(parts[2])
                customer = self.register_customer(name, password, user_id)
                for part in parts[4:]:
                    try:
                        bike_id = int(part)
                    except ValueError:
                        break
                    customer.add_rental(bike_id)