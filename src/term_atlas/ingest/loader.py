"""Load records from exported JSON, YAML or CSV files."""

import csv
import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ..models import Record

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml", ".csv")


def _read_rows(file_path: Path) -> list[Any]:
    ext = file_path.suffix.lower()
    text = file_path.read_text(encoding="utf-8", errors="replace")

    if ext == ".csv":
        return list(csv.DictReader(text.splitlines()))
    if ext == ".json":
        data = json.loads(text) if text.strip() else []
    elif ext in (".yaml", ".yml"):
        data = yaml.safe_load(text) or []
    else:
        raise ValueError(f"Unsupported record file type: {file_path.suffix or file_path.name}")

    # Accept {"records": [...]} / {"data": [...]} wrappers from API exports
    if isinstance(data, dict):
        for key in ("records", "rows", "data"):
            if isinstance(data.get(key), list):
                return data[key]
        raise ValueError(f"No record list found in {file_path}")
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of records in {file_path}")
    return data


def _coerce_csv(value: str | None) -> Any:
    """CSV cells are strings; treat blanks as missing and digits as ints."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if value.lstrip("-").isdigit():
        return int(value)
    return value


def row_to_record(row: dict[str, Any], config: dict[str, Any]) -> Record | None:
    """Map one exported row onto a Record using the ``records`` config section.

    Returns None if the row has no identifier.
    """
    rec_cfg = config.get("records", {})
    identifier = row.get(rec_cfg.get("id_field", "id"))
    if identifier is None or identifier == "":
        return None

    texts = []
    for name in rec_cfg.get("text_fields", []):
        value = row.get(name)
        if value is None:
            continue
        texts.append(value if isinstance(value, str) else str(value))

    return Record(
        id=identifier,
        texts=tuple(texts),
        group=_group_key(row.get(rec_cfg.get("group_field", "group")), identifier),
    )


def _group_key(value: Any, identifier: Any) -> Any:
    """Blank or unhashable group values fall into the unclassified bucket."""
    if isinstance(value, str) and not value.strip():
        return None
    try:
        hash(value)
    except TypeError:
        logger.warning(f"Record {identifier!r} has an unusable group value {value!r}; treating as unclassified")
        return None
    return value


def load_records(path: str | Path, config: dict[str, Any]) -> list[Record]:
    """Read a record file into Records, preserving row order.

    Args:
        path: Path to a .json, .yaml/.yml or .csv export.
        config: Application configuration dict.

    Returns:
        List of Records. Rows without an identifier are skipped.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file type or payload shape is not supported.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Record file not found: {file_path}")

    rows = _read_rows(file_path)
    is_csv = file_path.suffix.lower() == ".csv"

    records = []
    for i, row in enumerate(rows):
        if not isinstance(row, dict):
            raise ValueError(f"Row {i} in {file_path} is not a mapping")
        if is_csv:
            if row.get(None):
                logger.warning(f"Ignoring {len(row[None])} extra cell(s) in row {i} of {file_path}")
            # DictReader files surplus cells under the None key
            row = {k: _coerce_csv(v) for k, v in row.items() if k is not None}
        record = row_to_record(row, config)
        if record is None:
            logger.warning(f"Skipping row {i} in {file_path}: missing identifier")
            continue
        records.append(record)
    return records
