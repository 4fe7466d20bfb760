"""
Query-string translation.

Turns the raw query parameters of a listing request into a QueryPlan and
hands the plan to a store-specific translator.
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from movie_api.core.interfaces import IQueryTranslator
from movie_api.core.models import (
    FilterOperator,
    FilterParameter,
    PaginationWindow,
    QueryConfig,
    QueryPlan,
    SearchPredicate,
    SortDirection,
    SortField,
)

ParamValue = Union[str, Sequence[str]]

# Maps bracket tokens from the query string to filter operators.
# For example, `?rating[gte]=8` becomes `rating >= 8`.
OPERATOR_MAP = {
    "gt": FilterOperator.GREATER_THAN,
    "gte": FilterOperator.GREATER_THAN_OR_EQUAL,
    "lt": FilterOperator.LESS_THAN,
    "lte": FilterOperator.LESS_THAN_OR_EQUAL,
    "in": FilterOperator.IN,
}

_BRACKET_KEY = re.compile(r"^(?P<field>.+)\[(?P<token>[^\[\]]*)\]$")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_positive_int(value: Optional[ParamValue], default: int) -> int:
    """
    Parse a pagination parameter, falling back to ``default``.

    Only the leading integer counts (``"2abc"`` is 2, ``"5.5"`` is 5).
    Missing, non-numeric and non-positive values never raise.
    """
    raw = _last(value)
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    number = int(match.group(1))
    return number if number >= 1 else default


def _last(value: Optional[ParamValue]) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return value[-1] if value else None


def _joined(value: Optional[ParamValue]) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return ",".join(value)


def _split_tokens(value: str) -> List[str]:
    return [token.strip() for token in value.split(",") if token.strip()]


class QueryTranslator:
    """
    Builds QueryPlans from query-string parameters.

    The translator knows nothing about the schema of the records: any key
    that is not reserved becomes a filter, and field validation is left to
    the store. When constructed with a store translator it can also produce
    the store-specific query for a plan.
    """

    def __init__(
        self,
        config: Optional[QueryConfig] = None,
        translator: Optional[IQueryTranslator] = None,
    ):
        """
        Initialize query translator.

        Args:
            config: Pagination defaults, default sort, search fields and
                reserved keys
            translator: Store-specific query translator implementation
        """
        self.config = config or QueryConfig()
        self.translator = translator

    def build_plan(self, params: Mapping[str, ParamValue]) -> QueryPlan:
        """
        Translate request parameters into a query plan.

        Args:
            params: Query parameters; repeated keys map to a list of values

        Returns:
            Immutable QueryPlan for this request
        """
        return QueryPlan(
            filters=self.parse_filters(params),
            search=self.parse_search(params.get("search")),
            select=self.parse_select(params.get("select")),
            sort=self.parse_sort(params.get("sort")),
            window=self.parse_window(params.get("page"), params.get("limit")),
        )

    def translate(self, plan: QueryPlan) -> Dict[str, Any]:
        """
        Translate a query plan into a store-specific query.

        Args:
            plan: Plan returned by build_plan()

        Returns:
            Store-specific query object
        """
        if self.translator is None:
            raise ValueError("No store translator configured.")
        return self.translator.translate(plan)

    def parse_filters(self, params: Mapping[str, ParamValue]) -> Tuple[FilterParameter, ...]:
        """Turn every non-reserved parameter into a filter predicate."""
        filters: List[FilterParameter] = []
        for key, value in params.items():
            if self._is_reserved(key):
                continue
            filters.append(self._parse_filter(key, value))
        return tuple(filters)

    def _is_reserved(self, key: str) -> bool:
        # `sort[gt]` still names the reserved `sort` key
        match = _BRACKET_KEY.match(key)
        field = match.group("field") if match else key
        return key in self.config.reserved_keys or field in self.config.reserved_keys

    def _parse_filter(self, key: str, value: ParamValue) -> FilterParameter:
        field, operator = key, FilterOperator.EQUALS

        match = _BRACKET_KEY.match(key)
        if match and match.group("token") in OPERATOR_MAP:
            field = match.group("field")
            operator = OPERATOR_MAP[match.group("token")]
        # Unknown bracket tokens stay part of the field name

        if operator is FilterOperator.IN:
            values = [value] if isinstance(value, str) else list(value)
            tokens = tuple(part for item in values for part in item.split(","))
            return FilterParameter(field=field, operator=operator, value=tokens)

        return FilterParameter(field=field, operator=operator, value=_last(value))

    def parse_search(self, value: Optional[ParamValue]) -> Optional[SearchPredicate]:
        term = _last(value)
        if not term:
            return None
        return SearchPredicate(term=term, fields=self.config.search_fields)

    def parse_select(self, value: Optional[ParamValue]) -> Tuple[str, ...]:
        raw = _joined(value)
        if not raw:
            return ()
        return tuple(_split_tokens(raw))

    def parse_sort(self, value: Optional[ParamValue]) -> Tuple[SortField, ...]:
        """
        Parse a comma separated sort string.

        A leading ``-`` sorts descending; the first token is the primary key.
        Falls back to the configured default sort.
        """
        raw = _joined(value)
        tokens = _split_tokens(raw) if raw else []
        if not tokens:
            tokens = _split_tokens(self.config.default_sort)

        sort_fields = []
        for token in tokens:
            if token.startswith("-"):
                if token[1:]:
                    sort_fields.append(SortField(field=token[1:], direction=SortDirection.DESC))
            else:
                sort_fields.append(SortField(field=token, direction=SortDirection.ASC))
        return tuple(sort_fields)

    def parse_window(
        self, page: Optional[ParamValue], limit: Optional[ParamValue]
    ) -> PaginationWindow:
        return PaginationWindow(
            page=parse_positive_int(page, self.config.default_page),
            limit=parse_positive_int(limit, self.config.default_limit),
        )
