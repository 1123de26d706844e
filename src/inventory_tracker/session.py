"""
Interactive menu loop for the inventory tracker.

The session reads one line per prompt from a text stream and writes the
transcript to another, so it can run against the console or in-memory
buffers alike.
"""
import math
import sys
from typing import Callable, Optional, TextIO

from .inventory import Inventory, InventoryFullError
from .models import Item, INT_MAX, INT_MIN, NAME_MAX_LENGTH, PRICE_MAX


MENU = (
    "\n=== Inventory System ===\n"
    "1. Add Item\n"
    "2. View Inventory\n"
    "3. Search Item\n"
    "4. Calculate Total Value\n"
    "5. Exit\n"
    "Select option: "
)

EXIT_OPTION = 5


def parse_int(text: str) -> int:
    """Parse an integer entry. Raises ValueError if malformed."""
    return int(text)


def parse_float(text: str) -> float:
    """Parse a decimal entry. Raises ValueError if malformed or not finite."""
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Not a finite number: {text!r}")
    return value


class InventorySession:
    """One running instance of the menu loop and its in-memory inventory."""

    def __init__(self, inventory: Optional[Inventory] = None,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        self.inventory = inventory if inventory is not None else Inventory()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def prompt(self, text: str) -> str:
        """
        Show a prompt and read one line of input.

        The trailing newline is stripped. Raises EOFError when the input
        stream is exhausted.
        """
        print(text, end='', file=self.stdout, flush=True)
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip('\n')

    def read_number(self, prompt: str, parse: Callable[[str], float],
                    error_message: str, minimum: Optional[float] = None,
                    maximum: Optional[float] = None):
        """
        Prompt for a numeric field.

        Returns the parsed value, or None after printing error_message if the
        entry is malformed or outside [minimum, maximum].
        """
        try:
            value = parse(self.prompt(prompt))
        except ValueError:
            self.say(error_message)
            return None
        if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
            self.say(error_message)
            return None
        return value

    def run(self) -> int:
        """Run the menu loop until exit or end of input. Returns exit status."""
        while True:
            try:
                choice_text = self.prompt(MENU)
                if not self.handle_choice(choice_text):
                    break
            except EOFError:
                self.say()
                self.say("Exiting...")
                break
        return 0

    def handle_choice(self, choice_text: str) -> bool:
        """Dispatch one menu selection. Returns False when the loop should stop."""
        try:
            choice = parse_int(choice_text)
        except ValueError:
            self.say("Invalid input. Enter a number.")
            return True

        if choice == 1:
            self.add_item()
        elif choice == 2:
            self.view_inventory()
        elif choice == 3:
            self.search_item()
        elif choice == 4:
            self.total_value()
        elif choice == EXIT_OPTION:
            self.say("Exiting...")
            return False
        else:
            self.say(f"Choose an option between 1 and {EXIT_OPTION}.")
        return True

    def add_item(self) -> Optional[Item]:
        """Prompt for a new record and append it. Nothing is stored on error."""
        if self.inventory.is_full:
            self.say("Inventory full.")
            return None

        item_id = self.read_number("Enter Item ID (number): ", parse_int, "Invalid ID.",
                                   minimum=INT_MIN, maximum=INT_MAX)
        if item_id is None:
            return None

        name = self.prompt("Enter Item Name: ")
        if len(name) > NAME_MAX_LENGTH:
            print(f"⚠️  Name truncated to {NAME_MAX_LENGTH} characters", file=self.stderr)

        quantity = self.read_number("Enter Quantity: ", parse_int, "Invalid quantity.",
                                    minimum=0, maximum=INT_MAX)
        if quantity is None:
            return None

        price = self.read_number("Enter Price per unit: ", parse_float, "Invalid price.",
                                 minimum=0, maximum=PRICE_MAX)
        if price is None:
            return None

        try:
            item = self.inventory.add(Item(id=item_id, name=name, quantity=quantity, price=price))
        except InventoryFullError:
            self.say("Inventory full.")
            return None

        self.say("Item added.")
        return item

    def view_inventory(self) -> None:
        if len(self.inventory) == 0:
            self.say("Inventory is empty.")
            return

        self.say()
        self.say("ID\tQty\tPrice\tName")
        for item in self.inventory:
            self.say(f"{item.id}\t{item.quantity}\t{item.price:.2f}\t{item.name}")

    def search_item(self) -> Optional[Item]:
        """Look up the first record with the entered id."""
        search_id = self.read_number("Enter Item ID to search: ", parse_int, "Invalid input.",
                                     minimum=INT_MIN, maximum=INT_MAX)
        if search_id is None:
            return None

        item = self.inventory.find(search_id)
        if item is None:
            self.say("Item not found.")
            return None

        self.say()
        self.say(f"Found: {item.name} (Qty: {item.quantity}, Price: ${item.price:.2f})")
        return item

    def total_value(self) -> float:
        total = self.inventory.total_value()
        self.say()
        self.say(f"Total Inventory Value: ${total:.2f}")
        return total
