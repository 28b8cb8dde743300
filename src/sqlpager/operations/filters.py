"""Tagged filter values.

A raw filter value is resolved into exactly one variant when the query spec
is constructed, so the builder never inspects value shapes itself:

    ``{"start": a, "end": b}``     -> RangeFilter   (``col BETWEEN ? AND ?``)
    list / tuple / set / frozenset -> ListFilter    (``col IN (?, ...)``)
    any other non-null value       -> ScalarFilter  (``col = ?``)
    ``None``                       -> AbsentFilter  (no predicate)
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Tuple, Union

from pydantic import Field, model_validator

from sqlpager.types.base import SQLPagerBaseModel


_RANGE_KEYS = frozenset({"start", "end"})


class RangeFilter(SQLPagerBaseModel):
    """Inclusive range; both bounds are required."""

    kind: Literal["range"] = "range"
    start: Any
    end: Any

    @model_validator(mode="after")
    def validate_bounds(self):
        if self.start is None or self.end is None:
            raise ValueError("Range filters require both 'start' and 'end'")
        return self


class ListFilter(SQLPagerBaseModel):
    """Membership test against an ordered collection of values."""

    kind: Literal["list"] = "list"
    values: Tuple[Any, ...] = Field(default_factory=tuple)


class ScalarFilter(SQLPagerBaseModel):
    """Equality against a single non-null value."""

    kind: Literal["scalar"] = "scalar"
    value: Any

    @model_validator(mode="after")
    def validate_value(self):
        if self.value is None:
            raise ValueError("Scalar filters require a non-null value; use AbsentFilter")
        return self


class AbsentFilter(SQLPagerBaseModel):
    """A filter key without a value. Emits no predicate."""

    kind: Literal["absent"] = "absent"


FilterValue = Annotated[
    Union[RangeFilter, ListFilter, ScalarFilter, AbsentFilter],
    Field(discriminator="kind"),
]

_FILTER_TYPES = (RangeFilter, ListFilter, ScalarFilter, AbsentFilter)


def to_filter_value(raw: Any) -> Union[RangeFilter, ListFilter, ScalarFilter, AbsentFilter]:
    """Resolve a raw filter value into its tagged variant.

    Sets are accepted for ``IN`` filters but carry no order, so their
    parameter order follows iteration order.

    Raises:
        ValueError: For a mapping that is not a ``start``/``end`` range, or a
            range with only one bound.
    """
    if isinstance(raw, _FILTER_TYPES):
        return raw

    if raw is None:
        return AbsentFilter()

    if isinstance(raw, Mapping):
        unknown = set(raw) - _RANGE_KEYS
        if unknown:
            raise ValueError(
                f"Unsupported filter mapping keys: {sorted(map(str, unknown))}. "
                "Only range mappings with 'start' and 'end' are supported."
            )
        start, end = raw.get("start"), raw.get("end")
        if start is None and end is None:
            return AbsentFilter()
        return RangeFilter(start=start, end=end)

    if isinstance(raw, (list, tuple, set, frozenset)):
        return ListFilter(values=tuple(raw))

    return ScalarFilter(value=raw)
