from __future__ import annotations

from typing import Dict, Optional

from vending_demo.models import Category, Item
from vending_demo.store import Catalog

COFFEE_CODE = 101
BISCUITS_CODE = 302

# category of the item just bought -> code of the item to recommend
SUGGESTION_RULES: Dict[Category, int] = {
    Category.HOT_DRINKS: BISCUITS_CODE,
}
DEFAULT_SUGGESTION = COFFEE_CODE


class SuggestionService:
    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def suggest(self, purchased: Item) -> Optional[Item]:
        code = SUGGESTION_RULES.get(purchased.category, DEFAULT_SUGGESTION)
        candidate = self.catalog.find_by_code(code)
        if not candidate or not self.catalog.is_available(candidate):
            return None
        return candidate
