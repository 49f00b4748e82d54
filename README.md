# sqlfmt

Build parameterized SQL statements printf-style, without ever pasting
values into the SQL text.

`sprintf` does not return a string. It returns a `Query` that holds the SQL
text with placeholders, and the arguments separately. Ask the query for its
SQL text in the placeholder style your database driver expects, and pass
the arguments along with it.

## Installation

```
pip install sqlfmt
```

## Usage

```python
from sqlfmt.query import sprintf, join
from sqlfmt.bindvar import PostgresBindVar, SimpleBindVar

q = sprintf("SELECT * FROM users WHERE country = %s AND age > %d", "US", 27)
q.query(PostgresBindVar())  # 'SELECT * FROM users WHERE country = $1 AND age > $2'
q.args()                    # ['US', 27]
```

Every directive (`%s`, `%d`, `%02d`, `%.2f`, `%'d`, ...) becomes a
placeholder; the verb, flags, width and precision only mark where an
argument goes. Write `%%` for a literal `%`.

Without explicit indexes, each directive takes the next argument. If the
number of directives and the number of arguments differ, `sprintf` raises
`ValueError`.

### Composing queries

A `Query` passed as an argument is inlined, and its arguments are kept in
the right order:

```python
where = sprintf("name=%s AND age=%d", "John", 27)
limit = sprintf("%d OFFSET %d", 10, 100)
q = sprintf("SELECT name FROM users WHERE %s LIMIT %s", where, limit)

q.query(PostgresBindVar())
# 'SELECT name FROM users WHERE name=$1 AND age=$2 LIMIT $3 OFFSET $4'
q.args()
# ['John', 27, 10, 100]
```

### Joining clauses

`join(queries, sep)` puts `" sep "` between the queries and combines their
arguments:

```python
conds = [sprintf("name LIKE %s", f"%{name}%") for name in ("apple", "orange", "coffee")]
sub = sprintf("SELECT product_id FROM order_item WHERE quantity > %d", 100)
q = sprintf("SELECT name FROM product WHERE id IN (%s) AND (%s)", sub, join(conds, "OR"))

q.query(PostgresBindVar())
# 'SELECT name FROM product WHERE id IN (SELECT product_id FROM order_item
#  WHERE quantity > $1) AND (name LIKE $2 OR name LIKE $3 OR name LIKE $4)'
q.args()
# [100, '%apple%', '%orange%', '%coffee%']
```

### Reusing an argument

Explicit indexes such as `%[1]s` refer to an argument by its 1-based
position. After `%[n]`, a directive without an index takes argument `n + 1`.
The same argument used several times shares one placeholder, and arguments
are listed in the order they first appear:

```python
q = sprintf("UPDATE t SET a = %[1]s, b = %[1]s WHERE c = %s", "id", "name")
q.query(PostgresBindVar())  # 'UPDATE t SET a = $1, b = $1 WHERE c = $2'
q.args()                    # ['id', 'name']

q = sprintf("a = %[2]s AND b = %[1]s", "first", "second")
q.query(PostgresBindVar())  # 'a = $1 AND b = $2'
q.args()                    # ['second', 'first']
```

The same `Query` object referred to more than once is inlined each time but
its arguments are bound only once. A directive that refers to a missing
argument raises `IndexError`.

## Placeholder styles

| Class              | Placeholders      | Used by                                 |
|--------------------|-------------------|-----------------------------------------|
| `SimpleBindVar`    | `?`               | SQLite, MySQL, SQL Server (mssql style) |
| `PostgresBindVar`  | `$1`, `$2`, ...   | PostgreSQL                              |
| `SQLServerBindVar` | `@p1`, `@p2`, ... | SQL Server (sqlserver style)            |
| `OracleBindVar`    | `:1`, `:2`, ...   | Oracle                                  |

They live in `sqlfmt.bindvar`. For another style, subclass `BindVar` and
implement `bind_var(i)`, which receives the zero-based position of the
argument and returns its placeholder.

## What it does not do

The package only builds SQL text and argument lists; it does not connect to
a database or run queries. Hand the result to your driver, for example the
standard library's `sqlite3`:

```python
cur.execute(q.query(SimpleBindVar()), q.args())
```