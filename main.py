# main.py

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from dotenv import load_dotenv

from catalog_client import CatalogClient
from components import Catalog
from config import Settings, load_settings
from display import DisplayItem, Storefront, build_storefront, count_missing_images
from errors import CatalogFetchError
from logging_config import setup_logging
from navigation import MENU, Page, ViewState, render_page, select_category

logger = logging.getLogger(__name__)

ADDRESS_PROMPT = "Enter server IP:port: "
COMMAND_PROMPT = "> "
QUIT_COMMANDS = {"quit", "exit", "q"}
ADDRESS_COMMAND = "address"

ReadFn = Callable[[str], str]
WriteFn = Callable[[str], None]


def _fmt_card(item: DisplayItem) -> List[str]:
    image_line = f"Image: {item.image_uri}" if item.has_image else "Image: not available"
    return [f"[ {item.title} ]", f"  {item.summary}", f"  {image_line}"]


def _fmt_menu() -> str:
    buttons = " | ".join(f"{label} ({category.value})" for label, category in MENU)
    return f"{buttons} | change server ({ADDRESS_COMMAND}) | quit"


def format_page(page: Page) -> List[str]:
    lines = [f"=== {page.title} ==="]
    if page.message:
        lines.extend(page.message.splitlines())
    if page.items:
        for item in page.items:
            lines.extend(_fmt_card(item))
            lines.append("")
        while lines and lines[-1] == "":
            lines.pop()
    elif not page.message:
        lines.append("No items in this category")
    return lines


def load_storefront(address: str, client: CatalogClient) -> tuple[Catalog, Storefront]:
    catalog = client.fetch(address)
    storefront = build_storefront(catalog)

    missing = count_missing_images(storefront.cpu_items) + count_missing_images(storefront.gpu_items)
    logger.info(
        "Catalog ready: %d CPUs, %d GPUs (%d without image)",
        len(catalog.cpus),
        len(catalog.gpus),
        missing,
    )
    return catalog, storefront


def _prompt_and_load(
    read: ReadFn,
    write: WriteFn,
    client: CatalogClient,
    address: str = "",
) -> Optional[Storefront]:
    """Keeps asking for an address until a catalog loads. None means the input ended."""
    while True:
        if not address:
            try:
                address = read(ADDRESS_PROMPT).strip()
            except EOFError:
                return None
            if not address:
                continue

        try:
            _, storefront = load_storefront(address, client)
            return storefront
        except (CatalogFetchError, ValueError) as e:
            logger.error("Catalog load failed for %s: %s", address, e)
            write(f"Could not load catalog from {address}: {e}")
            address = ""


def run(
    settings: Settings,
    read: ReadFn = input,
    write: WriteFn = print,
    client: Optional[CatalogClient] = None,
) -> int:
    client = client or CatalogClient(port=settings.port, timeout=settings.timeout_seconds)

    storefront = _prompt_and_load(read, write, client, settings.server_address)
    if storefront is None:
        return 0

    state = ViewState()
    for line in format_page(render_page(state, storefront)):
        write(line)
    write(_fmt_menu())

    while True:
        try:
            command = read(COMMAND_PROMPT).strip().lower()
        except EOFError:
            return 0

        if command in QUIT_COMMANDS:
            return 0

        if command == ADDRESS_COMMAND:
            new_storefront = _prompt_and_load(read, write, client)
            if new_storefront is None:
                return 0
            storefront = new_storefront
            state = ViewState()
        else:
            try:
                state = select_category(state, command)
            except ValueError:
                write(_fmt_menu())
                continue

        for line in format_page(render_page(state, storefront)):
            write(line)


def main() -> None:
    load_dotenv("config.env", override=True)
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file)

    try:
        raise SystemExit(run(settings))
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
