# addicted/dashboard.py
"""
Dashboard page model and updater.

The page is rendered server-side: each page load builds a fresh
DashboardPage, runs update_dashboard() once, and the template prints
whatever text the elements ended up with.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable, Optional, Tuple

from addicted.config import Settings, settings as default_settings
from addicted.services.jupiter import get_weed_price
from addicted.services.solana import get_circulating_supply
from addicted.utils.logger import get_logger

logger = get_logger(__name__)

PRICE_ELEMENT_ID = "weed-price"
SUPPLY_ELEMENT_ID = "current-supply"
DEFAULT_ELEMENT_IDS = (PRICE_ELEMENT_ID, SUPPLY_ELEMENT_ID)
PLACEHOLDER = "--"


class Element:
    def __init__(self, element_id: str, text_content: str = PLACEHOLDER):
        self.id = element_id
        self.text_content = text_content

    def __repr__(self):
        return f"Element(id={self.id!r}, text_content={self.text_content!r})"


class DashboardPage:
    """Display elements keyed by id. Ids not on the page are simply absent."""

    def __init__(self, element_ids: Iterable[str] = DEFAULT_ELEMENT_IDS, placeholder: str = PLACEHOLDER):
        self.elements: Dict[str, Element] = {eid: Element(eid, placeholder) for eid in element_ids}

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self.elements.get(element_id)

    def text(self, element_id: str, default: str = "") -> str:
        el = self.get_element_by_id(element_id)
        return el.text_content if el is not None else default


def format_price(price: float) -> str:
    """0.0042 -> '$0.0042'"""
    return f"${price:.4f}"


def format_supply(supply: float) -> str:
    """Thousands grouping, at most 3 fraction digits, no trailing zeros."""
    text = f"{supply:,.3f}"
    return text.rstrip("0").rstrip(".")


def _write(page: DashboardPage, element_id: str, text: str) -> bool:
    el = page.get_element_by_id(element_id)
    if el is None:
        return False
    el.text_content = text
    return True


def update_dashboard(
    page: DashboardPage,
    settings: Settings = None,
    price_fetcher: Callable[[Settings], Optional[float]] = get_weed_price,
    supply_fetcher: Callable[[Settings], Optional[float]] = get_circulating_supply,
) -> Tuple[Optional[float], Optional[float]]:
    """
    Fetch price and supply in parallel, then write both into the page.

    Both fetches are joined before any element is touched. A value that
    could not be fetched leaves its element as it was; so does a page
    without the matching element.

    Returns:
        (price, supply) as fetched, either may be None
    """
    cfg = settings or default_settings

    with ThreadPoolExecutor(max_workers=2) as ex:
        price_fut = ex.submit(price_fetcher, cfg)
        supply_fut = ex.submit(supply_fetcher, cfg)
        price = price_fut.result()
        supply = supply_fut.result()

    if price is not None:
        _write(page, PRICE_ELEMENT_ID, format_price(price))
    if supply is not None:
        _write(page, SUPPLY_ELEMENT_ID, format_supply(supply))

    logger.debug(f"Dashboard updated: price={price} supply={supply}")
    return price, supply
