# navigation.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from display import DisplayItem, Storefront

SHOP_NAME = "notDNSshop"
HOME_TEXT = (
    f"Welcome to {SHOP_NAME}, the PC components store\n"
    "Choose a category on the panel"
)


class Category(str, Enum):
    HOME = "home"
    CPU = "cpu"
    GPU = "gpu"


# Order of the buttons on the top panel.
MENU: Tuple[Tuple[str, Category], ...] = (
    ("Home", Category.HOME),
    ("CPU", Category.CPU),
    ("GPU", Category.GPU),
)


@dataclass(frozen=True)
class ViewState:
    category: Category = Category.HOME


@dataclass(frozen=True)
class Page:
    title: str
    items: Tuple[DisplayItem, ...] = ()
    message: str = ""


def parse_category(value: Union[Category, str]) -> Category:
    if isinstance(value, Category):
        return value

    key = (value or "").strip().lower()
    for label, category in MENU:
        if key in (label.lower(), category.value):
            return category
    raise ValueError(f"unknown category: {value!r}")


def select_category(state: ViewState, category: Union[Category, str]) -> ViewState:
    """Every category is reachable from every state, including the current one."""
    return ViewState(category=parse_category(category))


def render_page(state: ViewState, storefront: Storefront) -> Page:
    if state.category is Category.CPU:
        return Page(title="CPU", items=storefront.cpu_items)
    if state.category is Category.GPU:
        return Page(title="GPU", items=storefront.gpu_items)
    return Page(title=SHOP_NAME, message=HOME_TEXT)
