# bikerental

A small console program for running a bike rental shop. Administrators keep
the bike inventory. Customers register, log in, rent bikes and return them.
Rentals are billed per second. A rental that is still running when the
program closes keeps counting while the program is shut down.

## Installing

```
pip install .
```

## Running

```
bikerental
```

The command takes these options:

- `--bikes-file PATH`: the bike data file. The default is `bikes_data.txt`.
- `--users-file PATH`: the customer data file. The default is `users_data.txt`.
- `--admin-name NAME`: the administrator's username. The default is `admin`.
- `--admin-id ID`: the administrator's user ID. The default is `1000`.

At startup the program prints the administrator's login details and waits for
Enter. It then loads both data files. A missing file is reported and the
program continues. The administrator account is registered each time the
program starts, and its password is always `password`.

The main menu has three entries:

1. **Login**: enter a username, a password and a user ID.
2. **Register as Customer**: enter a username, a password and a user ID. The
   user ID must not already be taken.
3. **Exit**: asks `y`/`n` before leaving.

On exit, the program writes both data files. It also writes them when input
ends or when it is interrupted.

### Administrator menu

1. Display every bike, followed by a count of the bikes that are available.
2. Search for a bike by ID or by brand.
3. Add a bike. The program asks for the ID, which must be unique, and then
   for the brand, model, type and frame size.
4. Delete a bike by ID.
5. View the active rentals as pairs of customer ID and bike ID.
6. Log out.

### Customer menu

1. Rent one of the available bikes.
2. Return a bike you rented. The program shows the rental duration and the
   total cost.
3. View the bikes you currently have.
4. Log out.

## Prices

A bike whose type is exactly `electrical` has a rate of 3.0. Every other bike
has a rate of 1.5. The rate is fixed when the bike is added.

The cost of a rental is its duration in seconds times the rate. The duration
is made up of three parts:

- the time counted in earlier sessions
- the time counted in the current session, in whole seconds
- the time the program was shut down

## Data files

Both data files are plain comma-separated text.

The bike file holds one bike per line with 11 fields:

- brand
- model
- ID
- type
- frame size
- rate
- mileage
- availability (`1` or `0`)
- the time rented so far
- the Unix time of shutdown
- the time spent offline

The last three fields are `0` for a bike that is available. A line with a
different number of fields makes loading fail with `ValueError`.

The customer file holds one customer per line: name, password, ID, the word
`customer`, then the IDs of the bikes that customer rents, each followed by a
comma.

## Using it from Python

- `bikerental.bike.Bike` is a dataclass holding a bike's details and the
  timing of its current rental.
- `bikerental.bikesystem.BikeSystem` keeps the inventory. It has these
  methods:
  - `add_bike`
  - `find_bike`
  - `available_bikes`
  - `search_by_brand`
  - `rent_bike`
  - `return_bike`, which returns a `RentalReceipt` with `bike_id`, `duration`
    and `cost`
  - `delete_bike`
  - `format_inventory`, `format_available` and `format_rentals`
  - `save` and `load`
- `bikerental.bikesystem.rate_for_type` gives the rate for a bike type.
- `bikerental.bikesystem.format_bike_details` describes one bike as text.
- Failed inventory operations raise subclasses of
  `bikerental.bikesystem.BikeRentalError`:
  - `BikeNotFoundError`
  - `BikeAlreadyRentedError`
  - `BikeNotRentedError`
  - `DuplicateBikeError`
- `bikerental.users` defines `User`, `Admin` and `Customer`. A `Customer`
  has the methods `add_rental`, `remove_rental` and `has_rental`.
- `bikerental.usermanagement.UserManagement` has these methods:
  - `register_customer`, which raises `ValueError` for a user ID that is
    already taken
  - `register_admin`
  - `login`, which returns the matching user or `None`
  - `save` and `load`
- `bikerental.cli` holds the menus (`run`, `admin_menu`, `customer_menu`,
  `search_menu`), the `Console` they read from and write to, and `main`.

## What it does not do

- The table of active rentals in the administrator menu is not saved. After a
  restart it starts empty, but each customer's own list of rented bikes is
  kept.
- The menus never record mileage. Mileage can only be changed from Python,
  with `Bike.add_mileage`.
- Passwords are stored in plain text in the customer file.
- Nothing prevents an administrator from deleting a bike that is rented.

## Tests

```
pip install .[test]
pytest
```