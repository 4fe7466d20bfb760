"""Query execution and result formatting."""

from movie_api.execution.executor import QueryExecutor
from movie_api.execution.result_formatter import ResultFormatter

__all__ = ["QueryExecutor", "ResultFormatter"]
