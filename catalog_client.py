# catalog_client.py

from __future__ import annotations

import logging
from typing import List, Type

from catalog_http import get_json
from components import CPU, GPU, Catalog, Record, decode_records
from config import DEFAULT_PORT, DEFAULT_TIMEOUT_SECONDS
from errors import DecodeError

logger = logging.getLogger(__name__)

CPU_RESOURCE = "cpus"
GPU_RESOURCE = "gpus"


def server_base_url(address: str, port: int = DEFAULT_PORT) -> str:
    """
    Turns a user supplied "host" or "host:port" into "http://host:port".

    A bare host gets the catalog port appended; an address that already
    names a port is used as given.
    """
    address = (address or "").strip().rstrip("/")
    if not address:
        raise ValueError("server address is empty")

    _, sep, tail = address.rpartition(":")
    if sep and tail.isdigit():
        return f"http://{address}"
    return f"http://{address}:{port}"


def resource_url(address: str, resource: str, port: int = DEFAULT_PORT) -> str:
    return f"{server_base_url(address, port)}/{resource}"


def _fetch_collection(url: str, resource: str, record_type: Type[Record], timeout: float | None) -> List[Record]:
    payload = get_json(url, resource=resource, timeout=timeout)
    try:
        records = decode_records(payload, record_type)
    except ValueError as e:
        raise DecodeError(str(e), resource=resource, url=url) from e

    logger.info("Loaded %d %s from %s", len(records), resource, url)
    return records


class CatalogClient:
    """Fetches the CPU and GPU collections of one server, one after the other."""

    def __init__(self, port: int = DEFAULT_PORT, timeout: float | None = DEFAULT_TIMEOUT_SECONDS):
        self.port = port
        self.timeout = timeout

    def fetch(self, address: str) -> Catalog:
        cpu_url = resource_url(address, CPU_RESOURCE, self.port)
        gpu_url = resource_url(address, GPU_RESOURCE, self.port)

        cpus = _fetch_collection(cpu_url, CPU_RESOURCE, CPU, self.timeout)
        gpus = _fetch_collection(gpu_url, GPU_RESOURCE, GPU, self.timeout)

        return Catalog(
            address=address.strip(),
            cpu_url=cpu_url,
            gpu_url=gpu_url,
            cpus=tuple(cpus),
            gpus=tuple(gpus),
        )


def fetch_catalog(
    address: str,
    *,
    port: int = DEFAULT_PORT,
    timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
) -> Catalog:
    return CatalogClient(port=port, timeout=timeout).fetch(address)
