# components.py

import logging
from dataclasses import dataclass, fields
from typing import Any, List, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CPU:
    id: int = 0
    name: str = ""
    cores: int = 0
    frequency: str = ""
    cache_size: str = ""
    tdp: int = 0
    link_image: str = ""


@dataclass(frozen=True)
class GPU:
    id: int = 0
    name: str = ""
    memory_size: int = 0
    core_clock: str = ""
    cuda_cores: int = 0
    power_consumption: int = 0
    link_image: str = ""


Record = TypeVar("Record", CPU, GPU)


@dataclass(frozen=True)
class Catalog:
    """Both collections fetched from one server address."""

    address: str
    cpu_url: str
    gpu_url: str
    cpus: Tuple[CPU, ...] = ()
    gpus: Tuple[GPU, ...] = ()


def _decode_value(raw: dict, name: str, default: Any) -> Any:
    value = raw.get(name)
    if value is None:
        return default

    if isinstance(default, int):
        # JSON true/false and 1.5 must not slip into an integer field.
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"field {name!r}: expected integer, got {type(value).__name__}")
        return value

    if not isinstance(value, str):
        raise ValueError(f"field {name!r}: expected string, got {type(value).__name__}")
    return value


def decode_record(raw: Any, record_type: Type[Record]) -> Record:
    """
    Build one record from a decoded JSON object.

    Unknown keys are ignored; missing or null keys keep the zero value.
    """
    if not isinstance(raw, dict):
        raise ValueError(f"expected a JSON object, got {type(raw).__name__}")

    values = {f.name: _decode_value(raw, f.name, f.default) for f in fields(record_type)}
    return record_type(**values)


def decode_records(payload: Any, record_type: Type[Record]) -> List[Record]:
    if not isinstance(payload, list):
        raise ValueError(f"expected a JSON array, got {type(payload).__name__}")

    records = []
    seen_ids = set()
    for index, raw in enumerate(payload):
        try:
            record = decode_record(raw, record_type)
        except ValueError as e:
            raise ValueError(f"item {index}: {e}") from e

        if record.id in seen_ids:
            logger.warning("Duplicate %s id %s at item %d", record_type.__name__, record.id, index)
        seen_ids.add(record.id)
        records.append(record)

    return records
