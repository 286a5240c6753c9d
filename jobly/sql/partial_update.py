"""
Partial-update SET fragment builder.

Turns a sparse mapping of field -> new value into the SET portion of an
UPDATE statement plus the values to bind, e.g.:

    {"name": "New", "numEmployees": None}
        -> '"name"=$1, "numEmployees"=$2', ["New", None]

Placeholders are numbered from 1 in the mapping's insertion order and
match the position of each value in SetFragment.values. Callers that
append further placeholders (a trailing WHERE clause) continue from
SetFragment.next_placeholder.

Identifiers written into the fragment come only from the mapping's keys
or from the caller's alias table. Values are never interpolated.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Tuple

from jobly.core.exceptions import InvalidFieldError, NoFieldsProvidedError


_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(frozen=True)
class SetFragment:
    """SET clause body and its positional values."""

    sql: str
    values: Tuple[Any, ...]

    @property
    def next_placeholder(self) -> int:
        return len(self.values) + 1


def build_partial_update(
    update: Mapping[str, Any],
    aliases: Mapping[str, str],
    allowed_fields: Optional[Iterable[str]] = None,
) -> SetFragment:
    """
    Build the SET fragment for a partial update.

    Args:
        update: Ordered mapping of logical field name to new value.
        aliases: Logical field name -> physical column name, for names that
            differ. Names absent from it are used unchanged.
        allowed_fields: When given, the only logical field names accepted.

    Returns:
        SetFragment with '"col"=$n' assignments joined by ', '.

    Raises:
        NoFieldsProvidedError: If update is empty.
        InvalidFieldError: If a field is not allowed, or its column name is
            not a plain SQL identifier.

    Example:
        >>> frag = build_partial_update({"companyHandle": "c1"},
        ...                             {"companyHandle": "company_handle"})
        >>> frag.sql
        '"company_handle"=$1'
        >>> frag.values
        ('c1',)
    """
    if not update:
        raise NoFieldsProvidedError()

    allowed = frozenset(allowed_fields) if allowed_fields is not None else None

    assignments = []
    values = []
    for position, (field, value) in enumerate(update.items(), start=1):
        if allowed is not None and field not in allowed:
            raise InvalidFieldError(field)

        column = aliases.get(field, field)
        if not isinstance(column, str) or not _IDENTIFIER_RE.match(column):
            raise InvalidFieldError(field)

        assignments.append(f'"{column}"=${position}')
        values.append(value)

    return SetFragment(sql=", ".join(assignments), values=tuple(values))
