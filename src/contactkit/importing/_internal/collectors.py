import logging
from collections.abc import Callable, Sequence
from typing import Any

from returns.result import Failure, Result, Success

from ...errors import ValidationError

logger = logging.getLogger(__name__)

type RowParser[T] = Callable[[Any], Result[T, ValidationError]]


def collect[T](raw_items: Sequence[Any], parse_item: RowParser[T]) -> Result[list[T], str]:
    """Parse every row, stopping at the first invalid one."""
    parsed_items = []
    for i, raw_item in enumerate(raw_items):
        result = parse_item(raw_item)
        if isinstance(result, Failure):
            return Failure(f"Error parsing row {i}: {result.failure()}")
        parsed_items.append(result.unwrap())

    return Success(parsed_items)


def collect_partial[T](
    raw_items: Sequence[Any], parse_item: RowParser[T]
) -> tuple[list[T], list[str]]:
    """Collect rows, returning both successes and failures.

    Unlike `collect`, this doesn't fail fast: invalid rows are skipped, logged
    and reported alongside the rows that parsed.
    """
    successes = []
    errors = []

    for i, raw_item in enumerate(raw_items):
        result = parse_item(raw_item)
        if isinstance(result, Success):
            successes.append(result.unwrap())
        else:
            error = result.failure()
            logger.warning("Skipping row %d (%s): %s", i, error.reason.value, error)
            errors.append(f"Row {i}: {error}")

    return successes, errors


__all__ = ["RowParser", "collect", "collect_partial"]
