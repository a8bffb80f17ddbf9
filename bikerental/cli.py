"""Interactive text menus of the bike rental system."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from bikerental.bike import Bike
from bikerental.bikesystem import (
    DEFAULT_BIKES_FILE,
    BikeAlreadyRentedError,
    BikeNotFoundError,
    BikeNotRentedError,
    BikeRentalError,
    BikeSystem,
    format_bike_details,
    rate_for_type,
)
from bikerental.usermanagement import DEFAULT_USERS_FILE, UserManagement
from bikerental.users import Admin, Customer

DEFAULT_ADMIN_NAME = "admin"
PASSWORD = "password"
DEFAULT_ADMIN_ID = 1000

_INVALID = "Invalid input, Try again!"


class Console:
    """Line-based terminal input and output."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        """Write a line of text."""
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def ask(self, prompt: str) -> str:
        """Show a prompt and read a line; raises EOFError when input ends."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("input ended")
        return line.strip()

    def ask_int(self, prompt: str, low: int | None = None, high: int | None = None) -> int:
        """Read an integer, asking again until it is valid and in range."""
        while True:
            reply = self.ask(prompt)
            try:
                value = int(reply)
            except ValueError:
                pass
            else:
                if (low is None or value >= low) and (high is None or value <= high):
                    return value
            self.say(_INVALID)

    def pause(self) -> None:
        """Wait until the user presses Enter."""
        self.stdout.write("Press Enter to continue . . .")
        self.stdout.flush()
        self.stdin.readline()
        self.stdout.write("\n")

    def clear(self) -> None:
        """Clear the screen when writing to a terminal."""
        isatty = getattr(self.stdout, "isatty", None)
        if isatty is not None and isatty():
            self.stdout.write("\033[2J\033[H")
            self.stdout.flush()


def prompt_new_bike(system: BikeSystem, console: Console) -> Bike:
    """Ask for a new bike's details and add it to the inventory."""
    while True:
        reply = console.ask(" Enter a unique bikeNUM\n")
        try:
            bike_id = int(reply)
        except ValueError:
            console.say("Invalid input. Please a valid ID consist of only numbers.")
            continue
        if system.bike_id_exists(bike_id):
            console.say("This bike number already exists. Please enter a unique number.")
            continue
        break
    brand = console.ask("Enter the brand\n")
    model = console.ask("Enter the model\n")
    bike_type = console.ask("Enter the type \n")
    frame_size = console.ask("Enter the framesize\n")
    console.say(" *** price ***")
    rate = rate_for_type(bike_type)
    if bike_type == "electrical":
        console.say("Electrical bike rate set to $3/hour")
    else:
        console.say("Regular bike rate set to $1.5/hour")
    bike = Bike(brand, model, bike_id, bike_type, frame_size, rate)
    system.add_bike(bike)
    return bike


def _show_bike(system: BikeSystem, console: Console, bike_id: int) -> None:
    try:
        bike = system.find_bike(bike_id)
    except BikeNotFoundError:
        console.say(f"Error : This Bike ID {bike_id} is not on the system")
        return
    console.say(format_bike_details(bike))


def search_menu(system: BikeSystem, console: Console) -> None:
    """Let the user look a bike up by ID or by brand."""
    console.say("1: search by ID  2:search by Brand\n")
    choice = console.ask_int("Enter your choice\n", 1, 3)
    if choice == 1:
        bike_id = console.ask_int("Enter bikeID\n")
        _show_bike(system, console, bike_id)
    elif choice == 2:
        brand = console.ask("Enter the Brand\n")
        matches = system.search_by_brand(brand)
        if not matches:
            console.say(f"NO Matching bikes for this brand : {brand}")
        for bike in matches:
            console.say(format_bike_details(bike))


def admin_menu(system: BikeSystem, console: Console) -> None:
    """The administrator's menu, until the administrator logs out."""
    while True:
        console.clear()
        console.say(
            "\n=====ADMIN MENU======\n"
            "1: displaying Bikes\n"
            "2: searching\n"
            "3: adding bike\n"
            "4: deleting bike\n"
            "5: view All Rentals\n"
            "6: loging out"
        )
        choice = console.ask_int("Enter choice: ", 1, 6)
        if choice == 1:
            console.clear()
            console.say(system.format_inventory())
            if system.bikes:
                console.pause()
        elif choice == 2:
            console.clear()
            console.say("SEARCHING FOR A BIKE ")
            search_menu(system, console)
            console.pause()
        elif choice == 3:
            console.clear()
            console.say("=== ADDING BIKE ===")
            prompt_new_bike(system, console)
            console.pause()
        elif choice == 4:
            console.say("====== DELETING BIKE ======")
            bike_id = console.ask_int("Enter the ID\n")
            try:
                system.delete_bike(bike_id)
            except BikeNotFoundError:
                console.say(f"Error : Bike of ID {bike_id} is not found")
            else:
                console.say(f"Bike {bike_id} is deleted successfully.")
            console.pause()
        elif choice == 5:
            console.say(system.format_rentals())
            console.pause()
        else:
            console.say("loging out.....")
            console.pause()
            return


def _rent(customer: Customer, system: BikeSystem, console: Console) -> None:
    console.clear()
    console.say("=== RENTING  BIKE ===")
    console.say("\n Available Bikes")
    try:
        console.say(system.format_available())
    except BikeRentalError as error:
        console.say(str(error))
        return
    bike_id = console.ask_int("\nEnter the bikeID to Rent : \n")
    try:
        system.rent_bike(bike_id, customer.user_id)
    except BikeNotFoundError as error:
        console.say(f"Error: {error}")
    except BikeAlreadyRentedError as error:
        console.say(str(error))
    else:
        console.say(f" (: bike of ID {bike_id} is rented sucessfully :) !! Time is Running ")
        customer.add_rental(bike_id)
    console.pause()


def _return(customer: Customer, system: BikeSystem, console: Console) -> None:
    console.clear()
    console.say("=== RETURNING BIKE ===")
    bike_id = console.ask_int("Enter the bikeID for Returning\n")
    if not customer.has_rental(bike_id):
        console.say("YOU Didnot rent any bikes")
        console.pause()
        return
    try:
        receipt = system.return_bike(bike_id, customer.user_id)
    except BikeNotFoundError as error:
        console.say(f"Error: {error}")
    except BikeNotRentedError as error:
        console.say(f"Error : {error}")
    else:
        console.say(f" Rental Duration: {receipt.duration:.2f} seconds")
        console.say(f" Total Cost :  {receipt.cost:.2f} HUF")
        console.say(" Bike returned successfully!")
    customer.remove_rental(bike_id)
    console.pause()


def customer_menu(customer: Customer, system: BikeSystem, console: Console) -> None:
    """The customer's menu, until the customer logs out."""
    while True:
        console.say(
            "\n===== CUSTOMER MENU =====\n"
            "1. Rent a Bike\n"
            "2. Return a Bike\n"
            "3. View my bike\n"
            "4. Logout"
        )
        choice = console.ask_int("choose an operation\n")
        if choice == 1:
            _rent(customer, system, console)
        elif choice == 2:
            _return(customer, system, console)
        elif choice == 3:
            console.clear()
            if not customer.rented_bike_ids:
                console.say("\nYou didn't rent any Bikes")
            for bike_id in customer.rented_bike_ids:
                _show_bike(system, console, bike_id)
            console.pause()
        elif choice == 4:
            console.say("loging out....")
            return


def confirm_exit(console: Console) -> bool:
    """Ask whether to leave the program; True for yes, False for no."""
    while True:
        answer = console.ask("Are you sure u want to exit the program : (y/n) \n")[:1]
        if answer in ("y", "Y"):
            return True
        if answer in ("n", "N"):
            return False


def _show_main_menu(console: Console) -> None:
    console.clear()
    console.say(
        "\n===== BIKE RENTAL SYSTEM =====\n"
        "1. Login\n"
        "2. Register as Customer\n"
        "3. Exit"
    )


def run(manager: UserManagement, system: BikeSystem, console: Console) -> None:
    """The main menu: log in, register, or leave."""
    _show_main_menu(console)
    while True:
        choice = console.ask_int("Enter the choice you want \n", 1, 3)
        if choice == 1:
            console.clear()
            username = console.ask("Username : ")
            entered = console.ask("password : ")
            user_id = console.ask_int("Your ID : ")
            user = manager.login(username, entered, user_id)
            if user is None:
                console.say("Invalid data")
                console.pause()
            else:
                console.say("loging is successful")
                if isinstance(user, Admin):
                    admin_menu(system, console)
                elif isinstance(user, Customer):
                    customer_menu(user, system, console)
        elif choice == 2:
            console.clear()
            username = console.ask("Enter a unique username : ")
            entered = console.ask("Enter a password: ")
            user_id = console.ask_int("Enter an ID: ")
            try:
                manager.register_customer(username, entered, user_id)
            except ValueError:
                console.say("UserID already exists")
            else:
                console.say("Registration is successful")
            console.pause()
        else:
            console.say("=== EXITING ===")
            if confirm_exit(console):
                return
        _show_main_menu(console)


def main(argv: list[str] | None = None) -> int:
    """Start the bike rental system and save its data on exit."""
    parser = argparse.ArgumentParser(prog="bikerental", description="Bike rental system.")
    parser.add_argument("--bikes-file", default=DEFAULT_BIKES_FILE)
    parser.add_argument("--users-file", default=DEFAULT_USERS_FILE)
    parser.add_argument("--admin-name", default=DEFAULT_ADMIN_NAME)
    parser.add_argument("--admin-id", type=int, default=DEFAULT_ADMIN_ID)
    args = parser.parse_args(argv)

    console = Console()
    console.say(
        " the data of the admin are the following :   "
        f"{args.admin_name}   {PASSWORD}   {args.admin_id}"
    )
    console.pause()

    manager = UserManagement()
    system = BikeSystem()
    try:
        system.load(args.bikes_file)
    except FileNotFoundError:
        console.say("Error : The file cannot be opened")
    try:
        manager.load(args.users_file)
    except FileNotFoundError:
        console.say("the file cannot be opened")
    manager.register_admin(args.admin_name, PASSWORD, args.admin_id)

    try:
        run(manager, system, console)
    except (EOFError, KeyboardInterrupt):
        console.say()
    finally:
        system.save(args.bikes_file)
        console.say("good bye")
        manager.save(args.users_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())