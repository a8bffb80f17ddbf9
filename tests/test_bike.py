from unittest import mock

from bikerental.bike import Bike


def make_bike(bike_id=1):
    return Bike("Giant", "TCR", bike_id, "road", "M", 1.5)


def test_new_bike_is_available_with_no_mileage():
    bike = make_bike()
    assert bike.available is True
    assert bike.mileage == 0.0
    assert bike.offline_period == 0.0


def test_total_bikes_counts_each_new_bike():
    before = Bike.total_bikes()
    make_bike()
    make_bike(2)
    assert Bike.total_bikes() == before + 2


def test_start_renting_marks_rented_and_mark_returned_restores():
    bike = make_bike()
    bike.start_renting()
    assert bike.available is False
    bike.mark_returned()
    assert bike.available is True


def test_current_duration_counts_whole_seconds():
    bike = make_bike()
    with mock.patch("time.monotonic", return_value=100.0):
        bike.start_renting()
    with mock.patch("time.monotonic", return_value=112.9):
        assert bike.current_duration() == 12.0


def test_current_duration_is_zero_when_never_rented():
    assert make_bike().current_duration() == 0.0


def test_add_mileage_accumulates():
    bike = make_bike()
    bike.add_mileage(2.5)
    bike.add_mileage(1.5)
    assert bike.mileage == 4.0


def test_restart_adds_offline_time_since_shutdown():
    bike = make_bike()
    with mock.patch("time.time", return_value=1000.0):
        bike.record_shutdown_time()
    assert bike.last_shutdown_time == 1000
    with mock.patch("time.time", return_value=1060.0):
        bike.record_restart_time()
    assert bike.restart_time == 1060
    assert bike.offline_period == 60


def test_restart_without_shutdown_keeps_offline_period():
    bike = make_bike()
    bike.offline_period = 7.0
    bike.record_restart_time()
    assert bike.offline_period == 7.0


def test_reset_rented_state_clears_timing():
    bike = make_bike()
    bike.previous_time = 5.0
    bike.offline_period = 3.0
    bike.last_shutdown_time = 10
    bike.restart_time = 20
    bike.reset_rented_state()
    assert (bike.previous_time, bike.offline_period) == (0.0, 0.0)
    assert (bike.last_shutdown_time, bike.restart_time) == (0, 0)