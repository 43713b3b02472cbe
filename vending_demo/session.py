from __future__ import annotations

from typing import Optional

from vending_demo.console import Console
from vending_demo.errors import InvalidAmountError, SessionStateError
from vending_demo.models import PurchaseResult, PurchaseStatus, SessionState
from vending_demo.money import to_pence
from vending_demo.services import SuggestionService
from vending_demo.store import Catalog

FINISH_CODE = 0


class VendingSession:
    """
    One customer's run at the machine: insert money, buy items, take change.

    The session owns the balance (whole pence). The catalog is created and
    initialized here unless one is passed in.
    """

    def __init__(self, catalog: Optional[Catalog] = None, session_id: int = 1):
        if catalog is None:
            catalog = Catalog()
            catalog.initialize()
        self.catalog = catalog
        self.session_id = session_id
        self.suggestions = SuggestionService(catalog)

        self.balance = 0
        self.state = SessionState.ACCEPTING_MONEY
        self.log("SESSION START")

    def log(self, message: str) -> None:
        self.catalog.log(f"[session={self.session_id}] {message}")

    def _require(self, state: SessionState, action: str) -> None:
        if self.state is not state:
            raise SessionStateError(f"Cannot {action} while {self.state.value}")

    def insert_money(self, amount: int) -> int:
        self._require(SessionState.ACCEPTING_MONEY, "insert money")
        if amount < 0:
            self.log(f"insert rejected: negative amount={amount}")
            raise InvalidAmountError(f"Amount cannot be negative: {amount}")
        self.balance += amount
        self.log(f"inserted amount={amount} (balance={self.balance})")
        return self.balance

    def finish_inserting(self) -> None:
        self._require(SessionState.ACCEPTING_MONEY, "finish inserting")
        self.state = SessionState.PURCHASING
        self.log(f"purchasing with balance={self.balance}")

    def purchase(self, code: int) -> PurchaseResult:
        self._require(SessionState.PURCHASING, "purchase")

        item = self.catalog.find_by_code(code)
        if not item:
            self.log(f"purchase rejected: invalid code={code}")
            return PurchaseResult(PurchaseStatus.INVALID_CODE, code, self.balance)

        if not self.catalog.is_available(item):
            self.log(f"purchase rejected: {item.name} out of stock")
            return PurchaseResult(PurchaseStatus.OUT_OF_STOCK, code, self.balance, item=item)

        if self.balance < item.price:
            shortfall = item.price - self.balance
            self.log(f"purchase rejected: {item.name} price={item.price} balance={self.balance} short={shortfall}")
            return PurchaseResult(
                PurchaseStatus.INSUFFICIENT_FUNDS, code, self.balance, item=item, shortfall=shortfall
            )

        self.balance -= item.price
        self.catalog.dispense_one(item)
        self.log(f"purchased: {item.name} price={item.price} (balance={self.balance})")

        suggestion = self.suggestions.suggest(item)
        return PurchaseResult(PurchaseStatus.DISPENSED, code, self.balance, item=item, suggestion=suggestion)

    def return_change(self) -> int:
        change = self.balance
        self.balance = 0
        self.state = SessionState.COMPLETE
        self.log(f"change returned: {change}")
        return change

    # Interactive driver

    def run(self, console: Console) -> int:
        console.say(f"Welcome to the Vending Machine ({console.currency} System)")
        console.say()
        self._accept_money(console)
        console.show_affordable(self.catalog.list_affordable(self.balance), self.balance)
        self._purchase_loop(console)
        return self.complete(console)

    def _read_amount(self, console: Console, prompt: str) -> int:
        amount = console.read_money(prompt)
        # sign is checked before rounding so -0.004 is still rejected
        while amount < 0:
            console.say("Amount cannot be negative.")
            amount = console.read_money(f"Insert money again ({console.currency}): {console.currency}")
        return to_pence(amount)

    def _accept_money(self, console: Console) -> None:
        c = console.currency
        amount = self._read_amount(console, f"Insert money ({c}). Enter 0 to stop: {c}")
        while amount > 0:
            self.insert_money(amount)
            console.say(f"You inserted {console.money(amount)}. Total balance: {console.money(self.balance)}")
            amount = self._read_amount(console, f"Insert more money or 0 to stop ({c}): {c}")
        self.finish_inserting()

    def _purchase_loop(self, console: Console) -> None:
        while True:
            console.show_menu(self.catalog.items, self.balance)
            code = console.read_code("Enter item code (0 to finish): ")
            if code == FINISH_CODE:
                return

            result = self.purchase(code)
            self._report(console, result)
            if not result.ok:
                continue

            if not console.confirm("Buy another item? (y/n): "):
                return

    def _report(self, console: Console, result: PurchaseResult) -> None:
        if result.status is PurchaseStatus.INVALID_CODE:
            console.say("Invalid code.")
        elif result.status is PurchaseStatus.OUT_OF_STOCK:
            console.say(f"{result.item.name} is OUT OF STOCK.")
        elif result.status is PurchaseStatus.INSUFFICIENT_FUNDS:
            console.say()
            console.say("Money is not sufficient to buy product, please insert more")
            console.say(
                f"Item price: {console.money(result.item.price)}, "
                f"Your balance: {console.money(result.balance)}, "
                f"Short by: {console.money(result.shortfall)}"
            )
        else:
            console.say()
            console.say(f"Dispensing: {result.item.name}")
            console.say(f"Remaining balance: {console.money(result.balance)}")
            console.say()
            console.say("--- Purchase Suggestion ---")
            if result.suggestion:
                console.say(
                    f"You might also like: {result.suggestion.name} ({console.money(result.suggestion.price)})"
                )
            else:
                console.say("No suggestions available.")

    def complete(self, console: Console) -> int:
        change = self.return_change()
        console.say()
        console.say("================ TRANSACTION COMPLETE ================")
        console.say(f"Your change: {console.money(change)}")
        console.say("Thank you for using the vending machine!")
        self.log("SESSION END")
        return change
