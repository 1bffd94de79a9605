import inspect
from pathlib import Path

import pytest
from mypy import api as mypy_api

from contactkit.domain import contact

SRC_DIR = Path(__file__).resolve().parents[2] / "src"

HEADER = '''\
from dataclasses import dataclass, replace
from typing import assert_never, cast

from contactkit.domain.contact import (
    Both,
    Contact,
    ContactInfo,
    EmailOnly,
    PostalContactInfo,
    PostalOnly,
    logger,
)


@dataclass(frozen=True)
class Fax:
    number: str


ExtendedInfo = ContactInfo | Fax


'''


def _write_module(tmp_path: Path, subject: str) -> tuple[Path, int]:
    source = inspect.getsource(contact.with_postal_address)
    source = source.replace("match contact.info:", f"match {subject}:")
    text = HEADER + source
    path = tmp_path / "postal_update.py"
    path.write_text(text, encoding="utf-8")
    line = next(i for i, row in enumerate(text.splitlines(), start=1) if "assert_never(" in row)
    return path, line


def _type_check(path: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> tuple[str, int]:
    monkeypatch.setenv("MYPYPATH", str(SRC_DIR))
    stdout, _stderr, exit_status = mypy_api.run(
        [
            "--follow-imports=silent",
            "--cache-dir",
            str(tmp_path / ".mypy_cache"),
            "--no-error-summary",
            str(path),
        ]
    )
    return stdout, exit_status


def test_with_postal_address_type_checks_over_current_variants(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path, _ = _write_module(tmp_path, "contact.info")
    stdout, exit_status = _type_check(path, tmp_path, monkeypatch)
    assert exit_status == 0, stdout


def test_fourth_variant_breaks_with_postal_address(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path, line = _write_module(tmp_path, "cast(ExtendedInfo, contact.info)")
    stdout, exit_status = _type_check(path, tmp_path, monkeypatch)
    assert exit_status != 0
    assert f"postal_update.py:{line}: error:" in stdout
    assert "assert_never" in stdout and '"Fax"' in stdout
