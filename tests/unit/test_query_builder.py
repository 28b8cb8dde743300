"""Unit tests for QueryBuilder.build()."""

import itertools
import re

import pytest

from sqlpager.common.exceptions import ErrorCode, ValidationError
from sqlpager.operations import QuerySpec
from sqlpager.query_builder import QueryBuilder
from sqlpager.settings import BuilderSettings

CLAUSE_PATTERN = re.compile(
    r"^SELECT .+? FROM \S+"
    r"(?: (?:LEFT|INNER|RIGHT|FULL|CROSS) JOIN \S+(?: \w+)? ON [^?]+?)*"
    r"(?: WHERE .+?)?"
    r"(?: GROUP BY [\w, ]+?)?"
    r"(?: ORDER BY [\w, ]+?)?"
    r"(?: LIMIT \? OFFSET \?)?$"
)

KEYWORDS = ("SELECT", "FROM", "JOIN", "WHERE", "GROUP BY", "ORDER BY", "LIMIT")


@pytest.fixture
def builder():
    return QueryBuilder(BuilderSettings(stringify_scalar_filters=True))


@pytest.fixture
def typed_builder():
    return QueryBuilder(BuilderSettings(stringify_scalar_filters=False))


class TestValidation:
    """Table name is the only builder-level contract."""

    @pytest.mark.parametrize("table_name", ["", "   ", None])
    def test_missing_table_name(self, builder, table_name):
        with pytest.raises(ValidationError, match="Table name is required") as exc_info:
            builder.build(QuerySpec(table_name=table_name))

        assert exc_info.value.error_code == ErrorCode.VALIDATION_ERROR
        assert exc_info.value.details["field"] == "table_name"
        assert exc_info.value.is_retryable is False

    def test_absent_table_name(self, builder):
        with pytest.raises(ValidationError):
            builder.build(QuerySpec(filters={"id": 1}))


class TestBuild:
    """Statement assembly."""

    def test_orders_example(self, builder):
        spec = QuerySpec(
            table_name="orders",
            filters={"status": "paid", "amount": {"start": 10, "end": 100}},
            sort=[{"column": "created_at", "direction": "desc"}],
            page=2,
            limit=5,
        )

        compiled = builder.build(spec)

        assert compiled.sql_text == (
            "SELECT * FROM orders WHERE status = ? AND amount BETWEEN ? AND ? "
            "ORDER BY created_at DESC LIMIT ? OFFSET ?"
        )
        assert compiled.parameters == ("paid", 10, 100, 5, 5)

    def test_minimal(self, builder):
        compiled = builder.build(QuerySpec(table_name="users"))
        assert compiled.sql_text == "SELECT * FROM users LIMIT ? OFFSET ?"
        assert compiled.parameters == (10, 0)

    def test_pagination_parameters(self, builder):
        compiled = builder.build(QuerySpec(table_name="users", page=3, limit=20))
        assert compiled.parameters[-2:] == (20, 40)

    def test_count_mode_has_no_limit(self, builder):
        compiled = builder.build(
            QuerySpec(table_name="users", filters={"id": [1, 2]}, page=7, limit=50, count_mode=True)
        )
        assert "LIMIT" not in compiled.sql_text
        assert "OFFSET" not in compiled.sql_text
        assert compiled.parameters == (1, 2)

    def test_full_statement(self, builder):
        spec = QuerySpec(
            table_name="orders o",
            columns=["c.region", "COUNT(*) AS n"],
            joins=[{"table": "customers c", "on": "c.id = o.customer_id"}],
            default_where_conditions="o.deleted_at IS NULL",
            filters={"o.status": ["paid", "shipped"], "o.total": {"start": 5, "end": 50}},
            group_by=["c.region"],
            sort=[{"column": "n", "order": "DESC"}, {"column": "c.region", "order": "asc"}],
            page=2,
            limit=25,
        )

        compiled = builder.build(spec)

        assert compiled.sql_text == (
            "SELECT c.region, COUNT(*) AS n FROM orders o "
            "LEFT JOIN customers c ON c.id = o.customer_id "
            "WHERE o.deleted_at IS NULL AND o.status IN (?, ?) AND o.total BETWEEN ? AND ? "
            "GROUP BY c.region "
            "ORDER BY n DESC, c.region ASC "
            "LIMIT ? OFFSET ?"
        )
        assert compiled.parameters == ("paid", "shipped", 5, 50, 25, 25)

    def test_default_where_only(self, builder):
        compiled = builder.build(
            QuerySpec(table_name="users", default_where_conditions="active = 1", filters={"x": None})
        )
        assert compiled.sql_text == "SELECT * FROM users WHERE active = 1 LIMIT ? OFFSET ?"

    def test_scalar_stringified(self, builder):
        compiled = builder.build(QuerySpec(table_name="users", filters={"id": 7}, count_mode=True))
        assert compiled.parameters == ("7",)

    def test_scalar_typed(self, typed_builder):
        compiled = typed_builder.build(QuerySpec(table_name="users", filters={"id": 7}, count_mode=True))
        assert compiled.parameters == (7,)

    def test_values_never_interpolated(self, builder):
        hostile = "x' OR '1'='1"
        compiled = builder.build(
            QuerySpec(table_name="users", filters={"name": hostile, "role": [hostile], "age": {"start": hostile, "end": 1}})
        )
        assert hostile not in compiled.sql_text
        assert compiled.parameters.count(hostile) == 3

    def test_builder_is_reusable(self, builder):
        first = builder.build(QuerySpec(table_name="a", filters={"id": [1, 2]}))
        second = builder.build(QuerySpec(table_name="b"))
        assert first.parameters == (1, 2, 10, 0)
        assert second.parameters == (10, 0)

    def test_defaults_from_settings(self, monkeypatch):
        monkeypatch.setenv("SQLPAGER_BUILDER_STRINGIFY_SCALAR_FILTERS", "false")
        from sqlpager.settings import _reload_settings

        try:
            _reload_settings()
            compiled = QueryBuilder().build(QuerySpec(table_name="t", filters={"id": 1}, count_mode=True))
            assert compiled.parameters == (1,)
        finally:
            monkeypatch.delenv("SQLPAGER_BUILDER_STRINGIFY_SCALAR_FILTERS")
            _reload_settings()


def _spec_variants():
    joins = [(), ({"table": "customers c", "on": "c.id = t.customer_id"},)]
    defaults = [None, "t.active = 1"]
    filters = [
        {},
        {"status": "x"},
        {"age": {"start": 1, "end": 5}, "id": [1, 2, 3], "gone": None},
        {"id": []},
    ]
    groups = [(), ("status",)]
    sorts = [(), ({"column": "id", "direction": "desc"},)]
    counts = [False, True]

    for join, default, flt, group, sort, count in itertools.product(
        joins, defaults, filters, groups, sorts, counts
    ):
        yield QuerySpec(
            table_name="t",
            joins=join,
            default_where_conditions=default,
            filters=flt,
            group_by=group,
            sort=sort,
            count_mode=count,
            page=2,
            limit=3,
        )


class TestStructure:
    """Properties that hold for every combination of clauses."""

    @pytest.mark.parametrize("spec", list(_spec_variants()))
    def test_placeholders_match_parameters(self, builder, spec):
        compiled = builder.build(spec)
        assert compiled.placeholder_count == len(compiled.parameters)

    @pytest.mark.parametrize("spec", list(_spec_variants()))
    def test_clause_order(self, builder, spec):
        sql = builder.build(spec).sql_text
        assert CLAUSE_PATTERN.match(sql), sql

        positions = [sql.find(keyword) for keyword in KEYWORDS if keyword in sql]
        assert positions == sorted(positions)

    @pytest.mark.parametrize("spec", list(_spec_variants()))
    def test_pagination_tail(self, builder, spec):
        compiled = builder.build(spec)
        if spec.count_mode:
            assert not compiled.sql_text.endswith("LIMIT ? OFFSET ?")
        else:
            assert compiled.sql_text.endswith("LIMIT ? OFFSET ?")
            assert compiled.parameters[-2:] == (3, 3)
