"""
MongoDB query translator.

Converts store-agnostic query plans to pymongo find() arguments.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING

from movie_api.adapters.mongodb.type_mappings import TypeMapper
from movie_api.core.models import (
    FilterOperator,
    FilterParameter,
    QueryPlan,
    SearchPredicate,
    SortDirection,
)

logger = logging.getLogger(__name__)

MONGO_OPERATORS = {
    FilterOperator.GREATER_THAN: "$gt",
    FilterOperator.GREATER_THAN_OR_EQUAL: "$gte",
    FilterOperator.LESS_THAN: "$lt",
    FilterOperator.LESS_THAN_OR_EQUAL: "$lte",
    FilterOperator.IN: "$in",
}


class MongoQueryTranslator:
    """
    Translates query plans to MongoDB find queries.

    Implements the IQueryTranslator interface for MongoDB.
    """

    def __init__(self, type_mapper: Optional[TypeMapper] = None):
        """
        Initialize MongoDB query translator.

        Args:
            type_mapper: Casts string values to the collection's field types
        """
        self.type_mapper = type_mapper or TypeMapper()

    def translate(self, plan: QueryPlan) -> Dict[str, Any]:
        """
        Convert a QueryPlan to MongoDB find() arguments.

        Args:
            plan: Query plan built from request parameters

        Returns:
            Dictionary with ``filter``, ``projection``, ``sort``, ``skip`` and
            ``limit`` keys
        """
        return {
            "filter": self.build_filter(plan),
            "projection": self.build_projection(plan.select),
            "sort": self.build_sort(plan),
            "skip": plan.window.skip,
            "limit": plan.window.limit,
        }

    def build_filter(self, plan: QueryPlan) -> Dict[str, Any]:
        """
        Build the filter document shared by the count and the page query.

        Filters on the same field are merged into one operator document.
        """
        conditions: Dict[str, Any] = {}

        for param in plan.filters:
            if param.field.startswith("$"):
                logger.debug("Ignoring operator-like filter field %r", param.field)
                continue
            clause = self._translate_condition(param)
            self._merge_condition(conditions, param.field, clause)

        if plan.search is not None:
            conditions["$or"] = self._translate_search(plan.search)

        return conditions

    def _translate_condition(self, param: FilterParameter) -> Any:
        value = self.type_mapper.coerce(param.field, param.value)

        if param.operator is FilterOperator.EQUALS:
            return value
        return {MONGO_OPERATORS[param.operator]: value}

    @staticmethod
    def _merge_condition(conditions: Dict[str, Any], field: str, clause: Any) -> None:
        if field not in conditions:
            conditions[field] = clause
            return

        existing = conditions[field]
        merged = dict(existing) if _is_operator_doc(existing) else {"$eq": existing}
        if _is_operator_doc(clause):
            merged.update(clause)
        else:
            merged["$eq"] = clause
        conditions[field] = merged

    @staticmethod
    def _translate_search(search: SearchPredicate) -> List[Dict[str, Any]]:
        pattern = re.escape(search.term)
        return [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in search.fields
        ]

    @staticmethod
    def build_projection(select: Tuple[str, ...]) -> Optional[Dict[str, int]]:
        """Map select tokens to a projection; ``-field`` excludes a field."""
        if not select:
            return None

        projection: Dict[str, int] = {}
        for field in select:
            if field.startswith("-"):
                projection[field[1:]] = 0
            else:
                projection[field] = 1
        return projection

    @staticmethod
    def build_sort(plan: QueryPlan) -> List[Tuple[str, int]]:
        return [
            (s.field, DESCENDING if s.direction is SortDirection.DESC else ASCENDING)
            for s in plan.sort
        ]


def _is_operator_doc(value: Any) -> bool:
    return isinstance(value, dict) and bool(value) and all(
        key.startswith("$") for key in value
    )
