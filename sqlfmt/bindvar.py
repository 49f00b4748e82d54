"""Placeholder styles used by different database drivers."""

from __future__ import annotations

from abc import ABC, abstractmethod

__all__ = [
    "BindVar",
    "SimpleBindVar",
    "PostgresBindVar",
    "SQLServerBindVar",
    "OracleBindVar",
]


class BindVar(ABC):
    """Produces the placeholder text for a bound variable."""

    __slots__ = ()

    @abstractmethod
    def bind_var(self, i: int) -> str:
        """Return the placeholder for the variable at zero-based position ``i``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SimpleBindVar(BindVar):
    """Placeholder style of SQLite, MySQL and the mssql driver: ``?``."""

    __slots__ = ()

    def bind_var(self, i: int) -> str:
        return "?"


class PostgresBindVar(BindVar):
    """Placeholder style of PostgreSQL: ``$1``, ``$2``, ..."""

    __slots__ = ()

    def bind_var(self, i: int) -> str:
        return f"${i + 1}"


class SQLServerBindVar(BindVar):
    """Placeholder style of the SQL Server driver: ``@p1``, ``@p2``, ..."""

    __slots__ = ()

    def bind_var(self, i: int) -> str:
        return f"@p{i + 1}"


class OracleBindVar(BindVar):
    """Placeholder style of Oracle Database: ``:1``, ``:2``, ..."""

    __slots__ = ()

    def bind_var(self, i: int) -> str:
        return f":{i + 1}"