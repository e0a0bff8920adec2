"""Record Mutation - pure filter matching and mutation application for documents.

Invariants:
    - apply_mutation never modifies its input; it returns a deep copy
    - $inc requires a numeric (non-bool) target; a missing field counts as 0
    - $push requires a list target; a missing field starts as []
    - Unknown operators raise ValueError before any field is touched

Design Decisions:
    - Shared by every document collection implementation so the SQL and
      in-memory backends agree on mutation semantics
"""

import copy
from typing import Any, Mapping

from blog_api.core.domain_types import MutationOperator, Record


def matches(record: Mapping[str, Any], filter_: Mapping[str, Any]) -> bool:
    """True when every filter field equals the record's field."""
    return all(
        key in record and record[key] == value
        for key, value in filter_.items()
    )


def validate_mutation(mutation: Mapping[str, Mapping[str, Any]]) -> None:
    for op in mutation:
        try:
            MutationOperator(op)
        except ValueError:
            raise ValueError(f"Unsupported mutation operator: {op}")


def apply_mutation(
    record: Mapping[str, Any], mutation: Mapping[str, Mapping[str, Any]],
) -> Record:
    """Return a new record with every operator in mutation applied."""
    validate_mutation(mutation)
    updated = copy.deepcopy(dict(record))
    for op, fields in mutation.items():
        operator = MutationOperator(op)
        for key, value in fields.items():
            if operator is MutationOperator.INC:
                _increment(updated, key, value)
            elif operator is MutationOperator.PUSH:
                _push(updated, key, value)
            else:
                updated[key] = copy.deepcopy(value)
    return updated


def _increment(record: Record, key: str, amount: Any) -> None:
    current = record.get(key, 0)
    for operand in (current, amount):
        if isinstance(operand, bool) or not isinstance(operand, (int, float)):
            raise ValueError(f"Cannot apply $inc to non-numeric field '{key}'")
    record[key] = current + amount


def _push(record: Record, key: str, item: Any) -> None:
    current = record.get(key)
    if current is None:
        current = []
    if not isinstance(current, list):
        raise ValueError(f"Cannot apply $push to non-list field '{key}'")
    record[key] = [*current, copy.deepcopy(item)]
