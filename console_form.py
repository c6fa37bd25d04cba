"""
Terminal rendition of the booking form.

Walks the user through each field, shows which dates are full, submits
through the real controller and store, and offers cancellation once a
booking is made.

Usage:
    python main.py
    python main.py --scenario full-day
"""

from typing import Callable, Optional

from consignment_booking.config import settings
from consignment_booking.form.controller import BookingFormController
from consignment_booking.form.fields import FIELD_DEFINITIONS
from consignment_booking.ledger.capacity import DateOption

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

QUIT_WORDS = ("quit", "exit", "q")


class _Quit(Exception):
    """Raised internally when the user asks to leave."""


class ConsoleForm:
    """Interactive booking form in the terminal."""

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[str]] = {
        "booking": [
            "Jane Doe", "jane@example.com", "0412 345 678", "", "1", "12",
            "c",
        ],
        "full-day": [
            "Jane Doe", "jane@example.com", "0412345678", "ACC-1", "1", "80",
            "n",
            "John Smith", "john@example.com", "0498765432", "", "1", "1",
        ],
    }

    MAX_INPUT_LENGTH = 200

    def __init__(
        self,
        controller: BookingFormController,
        input_fn: Callable[[str], str] = input,
    ) -> None:
        self.controller = controller
        self._input = input_fn

    def say(self, text: str, color: str = GREEN) -> None:
        print(f"{color}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def _ask(self, prompt: str) -> str:
        raw = self._input(f"{BLUE}{prompt}: {RESET}").strip()
        if raw.lower() in QUIT_WORDS:
            raise _Quit
        if len(raw) > self.MAX_INPUT_LENGTH:
            return raw[: self.MAX_INPUT_LENGTH]
        return raw

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.business_name.upper()} - {title}{RESET}")
        print(f"{BOLD}  Type 'quit' to exit{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def run(self, title: str = "Console Form") -> None:
        self._banner(title)
        try:
            while True:
                if self.controller.submitted:
                    self._handle_submitted()
                else:
                    self._fill_form()
                    self._submit()
        except _Quit:
            pass

        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  Session ended.{RESET}")
        print(f"{DIM}  State trace: {' -> '.join(self.controller.sm.get_state_trace())}{RESET}")
        print(f"{DIM}  Totals: {self.controller.store.totals}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario, then stop."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        remaining = list(steps)

        def scripted(prompt: str) -> str:
            value = remaining.pop(0) if remaining else "quit"
            print(f"{prompt}{value}")
            return value

        self._input = scripted
        self.run(title=f"Scenario: {scenario}")

    # ------------------------------------------------------------------ #
    # Editing
    # ------------------------------------------------------------------ #

    def _render_dates(self, options: list[DateOption]) -> None:
        for i, option in enumerate(options, start=1):
            suffix = f" {RED}(Full){RESET}" if option["disabled"] else ""
            print(f"  {i}. {option['label']}{suffix}")

    def _choose_date(self, options: list[DateOption]) -> str:
        self._render_dates(options)
        while True:
            choice = self._ask(f"Select Date (1-{len(options)})")
            if choice.isdigit() and 1 <= int(choice) <= len(options):
                return options[int(choice) - 1]["value"]
            self.say("Please pick one of the listed dates by number.", YELLOW)

    def _fill_form(self) -> None:
        for definition in FIELD_DEFINITIONS:
            while True:
                if definition.name == "date":
                    value = self._choose_date(self.controller.date_options())
                else:
                    value = self._ask(definition.display_name)
                if self.controller.set_field(definition.name, value):
                    break
                self.say(self.controller.error, YELLOW)

    def _submit(self) -> None:
        result = self.controller.submit()
        if result["success"]:
            self.system_log(f"State: {self.controller.state.value}")
            return
        self.say(self.controller.error, RED)

    # ------------------------------------------------------------------ #
    # Submitted
    # ------------------------------------------------------------------ #

    def _handle_submitted(self) -> None:
        booking = self.controller.held_booking()
        self.say("Booking successful!")
        print(f"Save this cancellation ID: {BOLD}{self.controller.cancel_id}{RESET}")
        if booking is not None:
            self.system_log(f"{booking.items} items on {booking.date}")

        choice = self._ask("Cancel this booking (c) or make another (n)").lower()
        if choice == "c":
            self.controller.cancel()
            self.say("Booking cancelled.", YELLOW)
        elif choice == "n":
            self.controller.start_new_booking()
        else:
            self.say("Please answer 'c', 'n' or 'quit'.", YELLOW)
        self.system_log(f"State: {self.controller.state.value}")


def build_console(storage_path: Optional[str] = None, in_memory: bool = False) -> ConsoleForm:
    """Wire storage, store, and controller into a ConsoleForm."""
    from consignment_booking.storage.booking_store import BookingStore
    from consignment_booking.storage.local_storage import InMemoryStorage, JsonFileStorage

    if in_memory:
        storage = InMemoryStorage()
    else:
        storage = JsonFileStorage(storage_path or settings.storage.path)
    return ConsoleForm(BookingFormController(BookingStore(storage)))
