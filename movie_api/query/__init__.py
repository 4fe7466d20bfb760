"""Query-string parsing and plan building."""

from movie_api.query.translator import OPERATOR_MAP, QueryTranslator, parse_positive_int

__all__ = ["OPERATOR_MAP", "QueryTranslator", "parse_positive_int"]
