"""
Batch import of contacts from raw rows.

`collect_contacts` fails on the first invalid row; `collect_valid_contacts`
skips invalid rows and reports them, for imports where a bad row is an
expected outcome rather than an error.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from returns.result import Result

from ..domain.contact import Contact
from ..utils import load_json
from ._internal.collectors import collect, collect_partial
from .records import ContactRecord, parse_contact, record_to_contact


def collect_contacts(rows: Sequence[Any]) -> Result[list[Contact], str]:
    return collect(rows, parse_contact)


def collect_valid_contacts(rows: Sequence[Any]) -> tuple[list[Contact], list[str]]:
    return collect_partial(rows, parse_contact)


def load_contacts(file_path: Path) -> Result[list[Contact], str]:
    """Load a JSON array of contact rows, failing on the first invalid row."""
    return load_json(file_path).bind(collect_contacts)


__all__ = [
    "ContactRecord",
    "collect_contacts",
    "collect_valid_contacts",
    "load_contacts",
    "parse_contact",
    "record_to_contact",
]
