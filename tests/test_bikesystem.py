from unittest import mock

import pytest

from bikerental.bike import Bike
from bikerental.bikesystem import (
    BikeAlreadyRentedError,
    BikeNotFoundError,
    BikeNotRentedError,
    BikeRentalError,
    BikeSystem,
    DuplicateBikeError,
    format_bike_details,
    rate_for_type,
)


@pytest.fixture
def system():
    bikes = BikeSystem()
    bikes.add_bike(Bike("Giant", "TCR", 7, "road", "M", rate_for_type("road")))
    bikes.add_bike(Bike("Trek", "Powerfly", 9, "electrical", "L", rate_for_type("electrical")))
    return bikes


def test_rate_for_type():
    assert rate_for_type("electrical") == 3.0
    assert rate_for_type("mountain") == 1.5


def test_add_duplicate_id_raises(system):
    with pytest.raises(DuplicateBikeError):
        system.add_bike(Bike("Other", "X", 7, "road", "S", 1.5))
    assert len(system.bikes) == 2


def test_find_and_exists(system):
    assert system.find_bike(9).brand == "Trek"
    assert system.bike_id_exists(7)
    assert not system.bike_id_exists(8)
    with pytest.raises(BikeNotFoundError):
        system.find_bike(8)


def test_rent_records_rental(system):
    bike = system.rent_bike(7, 42)
    assert bike.available is False
    assert system.rentals == {42: 7}
    assert [b.bike_id for b in system.available_bikes()] == [9]


def test_rent_errors(system):
    with pytest.raises(BikeNotFoundError):
        system.rent_bike(100, 1)
    system.rent_bike(7, 1)
    with pytest.raises(BikeAlreadyRentedError):
        system.rent_bike(7, 2)


def test_return_computes_cost(system):
    with mock.patch("time.monotonic", return_value=1000.0):
        system.rent_bike(9, 5)
    with mock.patch("time.monotonic", return_value=1045.0):
        receipt = system.return_bike(9, 5)
    assert receipt.bike_id == 9
    assert receipt.duration == 45
    assert receipt.cost == receipt.duration * system.find_bike(9).rate
    assert system.find_bike(9).available is True
    assert system.rentals == {}


def test_return_includes_previous_and_offline(system):
    with mock.patch("time.monotonic", return_value=0.0):
        bike = system.rent_bike(7, 1)
    bike.previous_time = 10.0
    bike.offline_period = 20.0
    with mock.patch("time.monotonic", return_value=0.0):
        receipt = system.return_bike(7, 1)
    assert receipt.duration == bike.rate * 0 + 30.0
    assert bike.previous_time == 0.0 and bike.offline_period == 0.0


def test_return_errors(system):
    with pytest.raises(BikeNotFoundError):
        system.return_bike(100, 1)
    with pytest.raises(BikeNotRentedError):
        system.return_bike(7, 1)


def test_delete_bike(system):
    removed = system.delete_bike(7)
    assert removed.bike_id == 7
    assert not system.bike_id_exists(7)
    with pytest.raises(BikeNotFoundError):
        system.delete_bike(7)


def test_search_by_brand(system):
    assert [b.bike_id for b in system.search_by_brand("Trek")] == [9]
    assert system.search_by_brand("Nobody") == []


def test_format_bike_details():
    bike = Bike("Giant", "TCR", 7, "road", "M", 1.5)
    text = format_bike_details(bike)
    assert "Price : 1.50" in text
    assert text.endswith("availability : Available")
    bike.start_renting()
    assert format_bike_details(bike).endswith("Rented     \n")


def test_format_inventory(system):
    system.rent_bike(7, 1)
    text = system.format_inventory()
    assert "CURRENT BIKES INVENTORY" in text
    assert text.endswith("Total bikes: 2 -> 1 available")
    assert "Powerfly" in text


def test_format_inventory_empty():
    assert BikeSystem().format_inventory().endswith("There are no bikes on the system")


def test_format_available(system):
    system.rent_bike(7, 1)
    text = system.format_available()
    assert "Powerfly" in text
    assert "TCR" not in text
    with pytest.raises(BikeRentalError):
        BikeSystem().format_available()


def test_format_rentals(system):
    assert system.format_rentals() == "NO active rentals"
    system.rent_bike(9, 3)
    system.rent_bike(7, 1)
    lines = system.format_rentals().splitlines()
    assert lines[-2].split() == ["1", "7"]
    assert lines[-1].split() == ["3", "9"]


def test_save_writes_available_bike_line(tmp_path):
    bikes = BikeSystem()
    bikes.add_bike(Bike("Giant", "TCR", 7, "road", "M", 1.5))
    path = tmp_path / "bikes.txt"
    bikes.save(path)
    assert path.read_text() == "Giant,TCR,7,road,M,1.5,0,1,0,0,0\n"


def test_save_load_round_trip(system, tmp_path):
    system.find_bike(9).add_mileage(12.5)
    path = tmp_path / "bikes.txt"
    system.save(path)
    loaded = BikeSystem()
    loaded.load(path)
    for original, copy in zip(system.bikes, loaded.bikes):
        assert (copy.brand, copy.model, copy.bike_id) == (original.brand, original.model, original.bike_id)
        assert (copy.bike_type, copy.frame_size, copy.rate) == (original.bike_type, original.frame_size, original.rate)
        assert copy.mileage == original.mileage
        assert copy.available == original.available
    assert len(loaded.bikes) == len(system.bikes)


def test_rented_bike_survives_restart(system, tmp_path):
    path = tmp_path / "bikes.txt"
    with mock.patch("time.monotonic", return_value=0.0):
        system.rent_bike(7, 1)
    with mock.patch("time.monotonic", return_value=30.0), mock.patch("time.time", return_value=5000.0):
        system.save(path)
    assert path.read_text().splitlines()[0].endswith(",0,30,5000,0")
    loaded = BikeSystem()
    with mock.patch("time.time", return_value=5100.0):
        loaded.load(path)
    bike = loaded.find_bike(7)
    assert bike.available is False
    assert bike.previous_time == 30.0
    assert bike.offline_period == 100


def test_load_rejects_malformed_line(tmp_path):
    path = tmp_path / "bikes.txt"
    path.write_text("Giant,TCR,7\n")
    with pytest.raises(ValueError):
        BikeSystem().load(path)