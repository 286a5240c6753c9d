"""
Filter predicate composition for list queries.

Each entity has a fixed set of optional filters. Active filters are turned
into SQL predicates joined by AND, with values bound through positional
placeholders numbered in a fixed evaluation order:

    companies: name (substring), minEmployees, maxEmployees
    jobs:      title (substring), minSalary, hasEquity

A filter that is None contributes nothing. hasEquity contributes
``equity > 0`` only when it is exactly True, and never binds a value.

The composer is mechanical: it does not reject contradictory bounds such
as minEmployees > maxEmployees. That check belongs to the caller.
"""

from dataclasses import dataclass
from typing import Any, List, Tuple

from jobly.models.schemas import CompanyFilters, JobFilters


@dataclass(frozen=True)
class PredicateFragment:
    """AND-joined predicates and their positional values."""

    sql: str
    values: Tuple[Any, ...]

    @property
    def where_clause(self) -> str:
        """The fragment prefixed with WHERE, or '' when no filter is active."""
        return f" WHERE {self.sql}" if self.sql else ""


def escape_like(text: str) -> str:
    """
    Escape LIKE metacharacters so the text matches literally.

    PostgreSQL's default LIKE escape character is the backslash.

    Example:
        >>> escape_like("100%_off")
        '100\\\\%\\\\_off'
    """
    return (
        text.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


class _PredicateBuilder:
    """Accumulates predicates, numbering placeholders as values are bound."""

    def __init__(self) -> None:
        self._predicates: List[str] = []
        self._values: List[Any] = []

    def bind(self, template: str, value: Any) -> None:
        # template holds a single {} for the placeholder
        self._values.append(value)
        self._predicates.append(template.format(f"${len(self._values)}"))

    def constant(self, predicate: str) -> None:
        self._predicates.append(predicate)

    def substring(self, column: str, text: str) -> None:
        self.bind(f"{column} ILIKE {{}}", f"%{escape_like(text)}%")

    def build(self) -> PredicateFragment:
        return PredicateFragment(
            sql=" AND ".join(self._predicates),
            values=tuple(self._values),
        )


def compose_company_filters(filters: CompanyFilters) -> PredicateFragment:
    """
    Build the WHERE body for a company search.

    Example:
        >>> compose_company_filters(CompanyFilters(name="net", minEmployees=10)).sql
        'name ILIKE $1 AND num_employees >= $2'
    """
    builder = _PredicateBuilder()

    if filters.name is not None:
        builder.substring("name", filters.name)
    if filters.minEmployees is not None:
        builder.bind("num_employees >= {}", filters.minEmployees)
    if filters.maxEmployees is not None:
        builder.bind("num_employees <= {}", filters.maxEmployees)

    return builder.build()


def compose_job_filters(filters: JobFilters) -> PredicateFragment:
    """
    Build the WHERE body for a job search.

    Example:
        >>> frag = compose_job_filters(JobFilters(title="eng", hasEquity=True))
        >>> frag.sql, frag.values
        ('title ILIKE $1 AND equity > 0', ('%eng%',))
    """
    builder = _PredicateBuilder()

    if filters.title is not None:
        builder.substring("title", filters.title)
    if filters.minSalary is not None:
        builder.bind("salary >= {}", filters.minSalary)
    if filters.hasEquity is True:
        builder.constant("equity > 0")

    return builder.build()
