# display.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

import requests

from components import CPU, GPU, Catalog
from errors import ImageResolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DisplayItem:
    title: str
    summary: str
    image_uri: Optional[str] = None

    @property
    def has_image(self) -> bool:
        return self.image_uri is not None


@dataclass(frozen=True)
class Storefront:
    """Card lists of one catalog, rebuilt whenever the catalog is replaced."""

    cpu_items: Tuple[DisplayItem, ...] = ()
    gpu_items: Tuple[DisplayItem, ...] = ()


def cpu_summary(cpu: CPU) -> str:
    return f"Cores: {cpu.cores} | Frequency: {cpu.frequency} | Cache: {cpu.cache_size} | TDP: {cpu.tdp}W"


def gpu_summary(gpu: GPU) -> str:
    return (
        f"Memory: {gpu.memory_size}GB | Clock: {gpu.core_clock} | "
        f"CUDA Cores: {gpu.cuda_cores} | TDP: {gpu.power_consumption}W"
    )


def summarize(record: Union[CPU, GPU]) -> str:
    if isinstance(record, CPU):
        return cpu_summary(record)
    if isinstance(record, GPU):
        return gpu_summary(record)
    raise TypeError(f"no summary template for {type(record).__name__}")


def resolve_image_uri(resource_url: str, link_image: str) -> Optional[str]:
    """
    Image location is the resource URL with the link appended as-is.

    "http://h:3000/cpus" + "img/x.png" -> "http://h:3000/cpusimg/x.png"
    Returns None for an empty link.
    """
    if not link_image:
        return None

    uri = f"{resource_url}{link_image}"
    try:
        requests.PreparedRequest().prepare_url(uri, None)
    except requests.exceptions.RequestException as e:
        raise ImageResolutionError(f"cannot parse image URI {uri!r}: {e}", link=link_image) from e

    if not uri.lower().startswith(("http://", "https://")):
        raise ImageResolutionError(f"unsupported image URI {uri!r}", link=link_image)

    return uri


def build_display_items(records: Iterable[Union[CPU, GPU]], resource_url: str) -> list[DisplayItem]:
    items = []
    for record in records:
        try:
            image_uri = resolve_image_uri(resource_url, record.link_image)
        except ImageResolutionError as e:
            logger.warning("Failed to parse image URI for %r: %s", record.name, e)
            image_uri = None
        else:
            if image_uri is None:
                logger.debug("No image link for %r", record.name)

        items.append(DisplayItem(title=record.name, summary=summarize(record), image_uri=image_uri))
    return items


def build_storefront(catalog: Catalog) -> Storefront:
    return Storefront(
        cpu_items=tuple(build_display_items(catalog.cpus, catalog.cpu_url)),
        gpu_items=tuple(build_display_items(catalog.gpus, catalog.gpu_url)),
    )


def count_missing_images(items: Sequence[DisplayItem]) -> int:
    return sum(1 for item in items if not item.has_image)
