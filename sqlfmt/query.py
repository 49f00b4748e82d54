"""Build parameterised SQL statements printf style.

``sprintf`` never renders argument values into the SQL text. Every format
verb becomes a placeholder, and the values are kept apart so they can be
handed to a database driver. A :class:`Query` passed as an argument is
inlined into the outer statement with its placeholders renumbered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence

from .bindvar import BindVar

__all__ = ["Query", "sprintf", "join"]

# Everything between '%' and the verb: optional [n], flags, width, precision.
_SPEC = re.compile(
    r"(?:\[(\d+)\])?"
    r"[#0+\- ']*"
    r"(?:\*(?:\[\d+\])?|\d*)"
    r"(?:\.(?:\*(?:\[\d+\])?|\d*))?",
    re.ASCII,
)


@dataclass(frozen=True)
class _Directive:
    start: int
    end: int
    index: int | None = None
    literal: bool = False


def _directives(fmt: str) -> Iterator[_Directive]:
    """Yield the format directives of ``fmt`` in order."""
    pos = fmt.find("%")
    while pos != -1 and pos + 1 < len(fmt):
        after = pos + 1
        if fmt[after] == "%":
            yield _Directive(pos, after + 1, literal=True)
            pos = fmt.find("%", after + 1)
            continue
        match = _SPEC.match(fmt, after)
        verb = match.end()
        if verb >= len(fmt):
            return
        index = int(match.group(1)) if match.group(1) is not None else None
        yield _Directive(pos, verb + 1, index)
        pos = fmt.find("%", verb + 1)


class _Builder:
    """Accumulates text segments separated by placeholders."""

    def __init__(self) -> None:
        self.parts = [""]

    def text(self, s: str) -> None:
        self.parts[-1] += s

    def placeholder(self) -> None:
        self.parts.append("")

    def query(self, q: Query) -> None:
        self.parts[-1] += q._parts[0]
        self.parts.extend(q._parts[1:])


class Query:
    """A SQL statement with placeholders and the values bound to them."""

    __slots__ = ("_parts", "_args", "_arg_indices")

    def __init__(
        self,
        parts: Sequence[str],
        args: Iterable[Any],
        arg_indices: Iterable[int] | None = None,
    ) -> None:
        self._parts = tuple(parts)
        self._args = tuple(args)
        self._arg_indices = None if arg_indices is None else tuple(arg_indices)

    def _indices(self) -> Sequence[int]:
        if self._arg_indices is not None:
            return self._arg_indices
        return range(len(self._args))

    def query(self, binder: BindVar) -> str:
        """Return the SQL text with placeholders rendered by ``binder``."""
        binds = (binder.bind_var(i) for i in self._indices())
        rest = "".join(
            bind + part for bind, part in zip(binds, self._parts[1:], strict=True)
        )
        return self._parts[0] + rest

    def args(self) -> list[Any]:
        """Return the values to pass alongside :meth:`query`."""
        return list(self._args)

    def __repr__(self) -> str:
        text = "%s".join(part.replace("%", "%%") for part in self._parts)
        return f"Query({text!r}, args={list(self._args)!r})"


def sprintf(format: str, *args: Any) -> Query:
    """Format ``format`` with ``args`` as bound values and return a Query.

    Raises IndexError when a verb refers to a missing argument, and
    ValueError when implicit verbs and arguments do not pair up.
    """
    directives = list(_directives(format))
    explicit = any(d.index is not None for d in directives) or any(
        isinstance(a, Query) and a._arg_indices is not None for a in args
    )
    if explicit:
        return _sprintf_explicit(format, directives, args)
    return _sprintf_sequential(format, directives, args)


def _sprintf_sequential(
    format: str, directives: list[_Directive], args: tuple[Any, ...]
) -> Query:
    verbs = sum(1 for d in directives if not d.literal)
    if verbs != len(args):
        raise ValueError(
            f"format has {verbs} verbs but {len(args)} arguments were given"
        )
    builder = _Builder()
    values: list[Any] = []
    remaining = iter(args)
    last = 0
    for d in directives:
        builder.text(format[last : d.start])
        last = d.end
        if d.literal:
            builder.text("%")
            continue
        arg = next(remaining)
        if isinstance(arg, Query):
            builder.query(arg)
            values.extend(arg._args)
        else:
            builder.placeholder()
            values.append(arg)
    builder.text(format[last:])
    return Query(builder.parts, values)


def _sprintf_explicit(
    format: str, directives: list[_Directive], args: tuple[Any, ...]
) -> Query:
    builder = _Builder()
    values: list[Any] = []
    indices: list[int] = []
    positions: dict[int, int] = {}
    # Nested queries are shared by identity: id -> (offset, indices).
    nested: dict[int, tuple[int, Sequence[int]]] = {}
    next_implicit = 0
    last = 0

    for d in directives:
        builder.text(format[last : d.start])
        last = d.end
        if d.literal:
            builder.text("%")
            continue

        if d.index is not None:
            arg_idx = d.index - 1
            next_implicit = d.index
        else:
            arg_idx = next_implicit
            next_implicit += 1

        if not 0 <= arg_idx < len(args):
            raise IndexError(
                f"argument index [{arg_idx + 1}] out of range; "
                f"have {len(args)} args"
            )
        arg = args[arg_idx]

        if isinstance(arg, Query):
            builder.query(arg)
            seen = nested.get(id(arg))
            if seen is None:
                seen = (len(values), arg._indices())
                nested[id(arg)] = seen
                values.extend(arg._args)
            offset, sub_indices = seen
            indices.extend(offset + i for i in sub_indices)
        else:
            builder.placeholder()
            pos = positions.get(arg_idx)
            if pos is None:
                pos = positions[arg_idx] = len(values)
                values.append(arg)
            indices.append(pos)

    builder.text(format[last:])
    return Query(builder.parts, values, indices)


def join(queries: Iterable[Query], sep: str) -> Query:
    """Concatenate ``queries`` with `` sep `` between them into one Query."""
    queries = list(queries)
    explicit = any(q._arg_indices is not None for q in queries)
    builder = _Builder()
    values: list[Any] = []
    indices: list[int] = []
    for n, q in enumerate(queries):
        if n:
            builder.text(f" {sep} ")
        builder.query(q)
        offset = len(values)
        indices.extend(offset + i for i in q._indices())
        values.extend(q._args)
    return Query(builder.parts, values, indices if explicit else None)