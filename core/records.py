"""
Records - The primary-key capability every decoded table record exposes.

The exporter makes exactly one structural assumption about decoded records:
each one has an integer primary key (the table's first column). Decoders make
that explicit by returning DecodedRecord instances, so ordering never depends
on inspecting an arbitrary record's fields.

  DecodedRecord     Abstract record: primary_key() and to_json()
  DictRecord        Adapter for decoders that produce ordered mappings
  sort_records()    Stable in-place sort by primary key
  serialize_records() Compact UTF-8 JSON array of the records
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class DecodedRecord(ABC):
    """One decoded row of a bundle table."""

    @abstractmethod
    def primary_key(self) -> int:
        """The record's first column, a signed 64-bit integer."""

    @abstractmethod
    def to_json(self) -> Any:
        """The record in a json-serializable form, fields as the decoder exposes them."""


class DictRecord(DecodedRecord):
    """A record backed by an ordered mapping whose first value is the key.

    Decoders that already produce dicts (column name -> value, in column order)
    can wrap each row in a DictRecord instead of defining a record class per
    table.
    """

    def __init__(self, fields: Mapping[str, Any]):
        if not fields:
            raise ValueError("record has no fields")
        self.fields = dict(fields)

    def primary_key(self) -> int:
        return next(iter(self.fields.values()))

    def to_json(self) -> Dict[str, Any]:
        return self.fields

    def __repr__(self):
        return f"DictRecord({self.fields!r})"


def _checked_key(record: DecodedRecord) -> int:
    key = record.primary_key()
    # bool is an int subclass but never a valid key
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"primary key must be an integer, got {type(key).__name__}: {key!r}")
    if not INT64_MIN <= key <= INT64_MAX:
        raise ValueError(f"primary key {key} is outside the signed 64-bit range")
    return key


def sort_records(records: List[DecodedRecord]) -> List[DecodedRecord]:
    """Sort records in place by primary key and return the same list.

    list.sort is stable, so records with equal keys keep the order the
    decoder returned them in.

    Raises:
        TypeError: If a record's key is not an integer.
        ValueError: If a record's key does not fit in 64 bits.
    """
    keys = {id(record): _checked_key(record) for record in records}
    records.sort(key=lambda record: keys[id(record)])
    return records


def serialize_records(records: List[DecodedRecord]) -> bytes:
    """Encode records as one compact JSON array, UTF-8, one element per record.

    Raises:
        ValueError: If a record holds NaN or Infinity, which JSON cannot represent.
    """
    document = [record.to_json() for record in records]
    return json.dumps(
        document, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode("utf-8")
