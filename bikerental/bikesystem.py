"""The bike inventory: renting, returning, searching and persistence."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from bikerental.bike import Bike

DEFAULT_BIKES_FILE = "bikes_data.txt"
ELECTRICAL_RATE = 3.0
REGULAR_RATE = 1.5
_NO_BIKES = "Error : There are no bikes on the system"
_RULE = "-" * 88
_DOUBLE_RULE = "=" * 88
_AVAILABLE = "Available"
_RENTED = "Rented     "


class BikeRentalError(Exception):
    """Base class for errors of the bike inventory."""


class BikeNotFoundError(BikeRentalError, LookupError):
    """No bike has the requested ID."""


class BikeAlreadyRentedError(BikeRentalError):
    """The bike is rented already."""


class BikeNotRentedError(BikeRentalError):
    """The bike being returned was not rented."""


class DuplicateBikeError(BikeRentalError):
    """A bike with this ID exists already."""


@dataclass(frozen=True)
class RentalReceipt:
    """The outcome of returning a bike."""

    bike_id: int
    duration: float
    cost: float


def rate_for_type(bike_type: str) -> float:
    """Rental rate for a bike of the given type."""
    return ELECTRICAL_RATE if bike_type == "electrical" else REGULAR_RATE


def _num(value: float) -> str:
    return f"{value:g}"


def _table_row(bike: Bike, brand_width: int) -> str:
    status = _AVAILABLE if bike.available else _RENTED
    return (
        f"{bike.brand:<{brand_width}}{bike.model:<12}{bike.bike_id:<8}"
        f"{bike.bike_type:<14}{bike.frame_size:<10}{bike.rate:<10.2f}"
        f"{bike.mileage:<10.2f}{status:<10}"
    )


def format_bike_details(bike: Bike) -> str:
    """Multi-line description of one bike."""
    availability = _AVAILABLE if bike.available else _RENTED + "\n"
    return (
        f"Brand : {bike.brand}\n"
        f"Model : {bike.model}\n"
        f" ID   : {bike.bike_id}\n"
        f"Type  : {bike.bike_type}\n"
        f"Size  : {bike.frame_size}\n"
        f"Price : {bike.rate:.2f}\n"
        f"mileage : {bike.mileage:.2f}\n"
        f"availability : {availability}"
    )


class BikeSystem:
    """The collection of bikes and the active rentals by customer."""

    def __init__(self) -> None:
        self.bikes: list[Bike] = []
        self.rentals: dict[int, int] = {}

    def add_bike(self, bike: Bike) -> None:
        """Add a bike whose ID is not yet in use."""
        if self.bike_id_exists(bike.bike_id):
            raise DuplicateBikeError(f"This bike number {bike.bike_id} already exists")
        self.bikes.append(bike)

    def bike_id_exists(self, bike_id: int) -> bool:
        return any(bike.bike_id == bike_id for bike in self.bikes)

    def find_bike(self, bike_id: int) -> Bike:
        """The bike with this ID; raises BikeNotFoundError if there is none."""
        for bike in self.bikes:
            if bike.bike_id == bike_id:
                return bike
        raise BikeNotFoundError(f"Bike {bike_id} not found on our system!")

    def available_bikes(self) -> list[Bike]:
        return [bike for bike in self.bikes if bike.available]

    def format_inventory(self) -> str:
        """Table of every bike followed by a count of the available ones."""
        lines = [
            "=============================================",
            "           CURRENT BIKES INVENTORY                    ",
            "=============================================",
            "",
        ]
        if not self.bikes:
            lines.append(_NO_BIKES)
            return "\n".join(lines)
        lines.append(
            f"{'NO.':<5}{'BRAND':<15}{'MODEL':<12}{'ID':<8}{'TYPE':<14}"
            f"{'SIZE':<8}{'PRICE':<10}{'KM':<10}{'AVAILABILITY':<12}"
        )
        lines.append(_RULE)
        for number, bike in enumerate(self.bikes, start=1):
            lines.append(f"{number:<5}{_table_row(bike, 15)}")
        lines.append(_DOUBLE_RULE)
        lines.append(
            f"Total bikes: {len(self.bikes)} -> {len(self.available_bikes())} available"
        )
        return "\n".join(lines)

    def format_available(self) -> str:
        """Table of the bikes that can be rented now."""
        if not self.bikes:
            raise BikeRentalError(_NO_BIKES)
        lines = [
            f"{'BRAND':<12}{'MODEL':<12}{'ID':<8}{'TYPE':<14}{'SIZE':<8}"
            f"{'PRICE':<10}{'KM':<10}{'AVAILABILITY':<12}"
        ]
        lines.extend(_table_row(bike, 12) for bike in self.available_bikes())
        return "\n".join(lines)

    def rent_bike(self, bike_id: int, user_id: int = 0) -> Bike:
        """Rent an available bike to a customer and start its clock."""
        bike = self.find_bike(bike_id)
        if not bike.available:
            raise BikeAlreadyRentedError(f"the bike of ID {bike_id} is already rented")
        bike.start_renting()
        self.rentals[user_id] = bike_id
        return bike

    def return_bike(self, bike_id: int, user_id: int = 0) -> RentalReceipt:
        """Return a rented bike and work out what the rental cost."""
        bike = self.find_bike(bike_id)
        if self.rentals.get(user_id) == bike_id:
            del self.rentals[user_id]
        if bike.available:
            raise BikeNotRentedError(f"bike of ID {bike_id} was not rented")
        period = bike.previous_time + bike.current_duration() + bike.offline_period
        bike.mark_returned()
        bike.reset_rented_state()
        return RentalReceipt(bike_id=bike_id, duration=period, cost=period * bike.rate)

    def delete_bike(self, bike_id: int) -> Bike:
        """Remove a bike from the inventory and hand it back."""
        bike = self.find_bike(bike_id)
        self.bikes.remove(bike)
        return bike

    def search_by_brand(self, brand: str) -> list[Bike]:
        return [bike for bike in self.bikes if bike.brand == brand]

    def format_rentals(self) -> str:
        """Table of the active rentals, ordered by customer ID."""
        if not self.rentals:
            return "NO active rentals"
        lines = [
            "",
            "=== ACTIVE RENTALS ===",
            "-------------------------",
            f"{'Customer ID':<15}{'Bike ID':<10}",
            "-------------------------",
        ]
        for user_id, bike_id in sorted(self.rentals.items()):
            lines.append(f"{user_id:<15}{bike_id:<10}")
        return "\n".join(lines)

    def save(self, path: str | Path = DEFAULT_BIKES_FILE) -> None:
        """Write every bike, with the timing of running rentals, to a file."""
        with open(path, "w", encoding="utf-8") as out:
            for bike in self.bikes:
                fields = [
                    bike.brand,
                    bike.model,
                    str(bike.bike_id),
                    bike.bike_type,
                    bike.frame_size,
                    _num(bike.rate),
                    _num(bike.mileage),
                    "1" if bike.available else "0",
                ]
                if bike.available:
                    fields += ["0", "0", "0"]
                else:
                    bike.record_shutdown_time()
                    bike.previous_time += bike.current_duration()
                    bike.rent_started = time.monotonic()
                    fields += [
                        _num(bike.previous_time),
                        str(bike.last_shutdown_time),
                        _num(bike.offline_period),
                    ]
                out.write(",".join(fields) + "\n")

    def load(self, path: str | Path = DEFAULT_BIKES_FILE) -> None:
        """Read bikes written by save, resuming the clocks of rented ones."""
        with open(path, encoding="utf-8") as source:
            for number, line in enumerate(source, start=1):
                line = line.rstrip("\r\n")
                if not line:
                    continue
                parts = line.split(",")
                if len(parts) != 11:
                    raise ValueError(f"line {number}: expected 11 fields, got {len(parts)}")
                brand, model, bike_id, bike_type, size = parts[:5]
                bike = Bike(brand, model, int(bike_id), bike_type, size, float(parts[5]))
                bike.available = int(parts[7]) != 0
                bike.add_mileage(float(parts[6]))
                bike.previous_time = float(parts[8])
                if not bike.available:
                    bike.rent_started = time.monotonic()
                    bike.last_shutdown_time = int(parts[9])
                    bike.offline_period = float(parts[10])
                    bike.record_restart_time()
                self.bikes.append(bike)