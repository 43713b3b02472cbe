from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable, List, Optional, TypeVar

from vending_demo.models import Item
from vending_demo.money import DEFAULT_CURRENCY, format_money, to_pence

MENU_RULE = "-" * 56
AFFORDABLE_RULE = "-" * 54

YES_ANSWERS = ("y", "yes")

T = TypeVar("T")


class Console:
    """
    Line-oriented terminal for a vending session.

    Input and output functions are injectable so tests can script a session
    and capture what was shown.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        currency: str = DEFAULT_CURRENCY,
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.currency = currency

    def say(self, line: str = "") -> None:
        self.output_fn(line)

    def money(self, pence: int) -> str:
        return format_money(pence, self.currency)

    def _read_number(self, prompt: str, parse: Callable[[str], Optional[T]]) -> T:
        while True:
            value = parse(self.input_fn(prompt).strip())
            if value is not None:
                return value
            self.say("Invalid input. Please enter a number.")

    def read_money(self, prompt: str) -> Decimal:
        """Prompt until a decimal amount that fits in pence is entered (may be negative)."""
        return self._read_number(prompt, _parse_money)

    def read_code(self, prompt: str) -> int:
        return self._read_number(prompt, _parse_int)

    def confirm(self, prompt: str) -> bool:
        return self.input_fn(prompt).strip().lower() in YES_ANSWERS

    def show_menu(self, items: Iterable[Item], balance: int) -> None:
        self.say()
        self.say("================ VENDING MACHINE MENU ================")
        self.say(f"Current balance: {self.money(balance)}")
        self.say()
        self.say(f"Code  Category       Item               Price ({self.currency}) Stock")
        self.say(MENU_RULE)
        for item in items:
            self.say(
                f"{item.code:<5} {item.category.value[:13]:<13}  {item.name[:18]:<18} "
                f"{self.money(item.price):>9}   {item.stock}"
            )
        self.say(MENU_RULE)
        self.say(f"Enter 0 to finish and get your change ({self.currency}).")

    def show_affordable(self, items: List[Item], balance: int) -> None:
        self.say()
        self.say(f"--- Items you can afford with your balance ({self.money(balance)}) ---")
        if not items:
            self.say("No items available within your balance.")
        for item in items:
            self.say(f"Code {item.code} - {item.name} ({self.money(item.price)}) | Stock: {item.stock}")
        self.say(AFFORDABLE_RULE)


def _parse_money(text: str) -> Optional[Decimal]:
    try:
        amount = Decimal(text)
        if not amount.is_finite():
            return None
        # raises for amounts with too many digits to round to pence
        to_pence(amount)
    except InvalidOperation:
        return None
    return amount


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None
