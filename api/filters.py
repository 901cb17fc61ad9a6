"""
Compile /elements query parameters into a SQLAlchemy statement.

Every request value reaches the database as a bound parameter; the SQL
text itself is fixed by the expressions below.

Two validation regimes coexist:
- period, meltingPoint, boilingPoint, density fail open: a value that does
  not parse (or is out of range) drops the clause.
- group and limit fail closed: a bad value is recorded as an error and the
  request is rejected with 400.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional
import math

from sqlalchemy import and_, func, select
from sqlalchemy.sql import ColumnElement, Select

from core.config import settings
from core.exceptions import ValidationError
from models.element import Element


@dataclass
class CompiledFilter:
    """One predicate and the value bound into it"""
    param: str
    clause: ColumnElement
    value: Any


@dataclass
class FilterSet:
    """Ordered predicates, optional limit and any fail-closed errors"""
    filters: List[CompiledFilter] = field(default_factory=list)
    limit: Optional[int] = None
    errors: List[str] = field(default_factory=list)

    @property
    def applied(self) -> List[str]:
        params = [f.param for f in self.filters]
        if self.limit is not None:
            params.append("limit")
        return params

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise ValidationError(self.errors[0], context={"errors": list(self.errors)})

    def build_query(self) -> Select:
        """SELECT elements WHERE <filters> ORDER BY atomicNumber LIMIT <limit>"""
        query = select(Element)
        if self.filters:
            query = query.where(and_(*[f.clause for f in self.filters]))
        query = query.order_by(Element.atomic_number.asc())
        if self.limit is not None:
            query = query.limit(self.limit)
        return query


def parse_number(value: Optional[str]) -> Optional[float]:
    """Finite decimal or None"""
    if value is None:
        return None
    try:
        number = float(value.strip())
    except (AttributeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_integer(value: Optional[str], minimum: int, maximum: int) -> Optional[int]:
    """Whole number within [minimum, maximum] or None"""
    number = parse_number(value)
    if number is None or not number.is_integer():
        return None
    number = int(number)
    if number < minimum or number > maximum:
        return None
    return number


def first_value(params: Mapping[str, str], param: str) -> Optional[str]:
    """
    Value of `param`, or None when absent.

    A repeated key resolves to its first occurrence (`?group=1&group=x` is
    group 1). Plain mappings hold a single value per key.
    """
    getlist = getattr(params, "getlist", None)
    if getlist is None:
        return params.get(param)
    values = getlist(param)
    return values[0] if values else None


def _case_insensitive(column) -> Callable[[str], ColumnElement]:
    return lambda value: func.lower(column) == func.lower(value)


def _greater_than(column) -> Callable[[float], ColumnElement]:
    return lambda value: column > value


# (param, clause factory, parser) in clause order; parser None = raw string
_FAIL_OPEN_FILTERS = (
    ("category", _case_insensitive(Element.category), None),
    ("state", _case_insensitive(Element.standard_state), None),
    ("period", lambda value: Element.period == value, lambda raw: parse_integer(raw, 1, 7)),
    ("block", _case_insensitive(Element.block), None),
    ("meltingPoint", _greater_than(Element.melting_point_value), parse_number),
    ("boilingPoint", _greater_than(Element.boiling_point_value), parse_number),
    ("density", _greater_than(Element.density_value), parse_number),
)


def compile_filters(params: Mapping[str, str]) -> FilterSet:
    """
    Translate query parameters into a FilterSet.

    Unknown parameters are ignored. The returned set is never partially
    applied: callers check `errors` (or `raise_for_errors`) before running
    `build_query`.
    """
    filter_set = FilterSet()

    for param, make_clause, parser in _FAIL_OPEN_FILTERS:
        raw = first_value(params, param)
        if raw is None:
            continue
        value = parser(raw) if parser else raw
        if value is None:
            continue
        filter_set.filters.append(CompiledFilter(param, make_clause(value), value))

    if "group" in params:
        group = parse_integer(first_value(params, "group"), 1, 18)
        if group is None:
            filter_set.errors.append("Invalid group parameter. Must be 1-18")
        else:
            filter_set.filters.append(CompiledFilter("group", Element.group_number == group, group))

    if "limit" in params:
        limit = parse_integer(first_value(params, "limit"), 1, settings.MAX_RESULT_LIMIT)
        if limit is None:
            filter_set.errors.append(f"Invalid limit parameter. Must be 1-{settings.MAX_RESULT_LIMIT}")
        else:
            filter_set.limit = limit

    return filter_set
