import pytest

from sqlfmt.bindvar import (
    BindVar,
    OracleBindVar,
    PostgresBindVar,
    SimpleBindVar,
    SQLServerBindVar,
)


@pytest.mark.parametrize("i", [0, 1, 5, 1000])
def test_simple_is_always_question_mark(i):
    assert SimpleBindVar().bind_var(i) == "?"


@pytest.mark.parametrize(
    ("i", "expected"), [(0, "$1"), (1, "$2"), (9, "$10"), (99, "$100")]
)
def test_postgres(i, expected):
    assert PostgresBindVar().bind_var(i) == expected


@pytest.mark.parametrize(
    ("i", "expected"), [(0, "@p1"), (1, "@p2"), (9, "@p10")]
)
def test_sqlserver(i, expected):
    assert SQLServerBindVar().bind_var(i) == expected


@pytest.mark.parametrize(("i", "expected"), [(0, ":1"), (1, ":2"), (9, ":10")])
def test_oracle(i, expected):
    assert OracleBindVar().bind_var(i) == expected


def test_bindvar_is_abstract():
    with pytest.raises(TypeError):
        BindVar()


@pytest.mark.parametrize(
    "binder_class", [SimpleBindVar, PostgresBindVar, SQLServerBindVar, OracleBindVar]
)
def test_subclass_without_bind_var_is_abstract(binder_class):
    class Incomplete(BindVar):
        pass

    with pytest.raises(TypeError):
        Incomplete()

    binder = binder_class()
    assert isinstance(binder, BindVar)
    assert binder.bind_var(0) in {"?", "$1", "@p1", ":1"}


def test_custom_subclass_extends_builtin():
    class TextCast(PostgresBindVar):
        def bind_var(self, i):
            return super().bind_var(i) + "::text"

    binder = TextCast()
    base = PostgresBindVar()
    assert isinstance(binder, BindVar)
    assert base.bind_var(0) == "$1"
    assert binder.bind_var(0) == "$1::text"
    assert binder.bind_var(4) == "$5::text"


def test_many_postgres_values_are_distinct():
    values = {PostgresBindVar().bind_var(i) for i in range(1000)}
    assert len(values) == 1000
    assert all(v.startswith("$") for v in values)


def test_repr_names_class():
    assert repr(OracleBindVar()) == "OracleBindVar()"