# ike/core/exceptions.py
"""
Core exceptions for the refinement engine.

Hierarchy:
    IkeError
    ├── QueryError - malformed query or unusable query shape
    └── TableError - example table unusable for the requested operation

Configuration errors live in ike.core.config (ConfigError and subclasses).
"""


class IkeError(Exception):
    """
    Base exception for all engine errors.

    Examples:
        >>> try:
        ...     sampler.get_labelled_sample(query, searcher, table)
        ... except IkeError as e:
        ...     print(f"Refinement failed: {e}")
    """

    pass


class QueryError(IkeError):
    """
    Invalid query for the requested operation.

    Raised for example when:
    - A table-limited sample is requested for a query with no capture group
    - A query operator targets a slot the query does not have
    - A substitution path does not exist in the tree
    """

    pass


class TableError(IkeError):
    """
    Table cannot be used for the requested operation.

    Raised for example when a table-limited sample is requested for a
    table that does not have exactly one column.
    """

    pass
