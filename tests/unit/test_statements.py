"""
Unit tests for the statement helpers.
"""

import pytest

from service.dal.statements import UpdateStatementBuilder, sql_parameter


class TestSqlParameter:
    """Test cases for sql_parameter."""

    @pytest.mark.parametrize("value, field", [
        ("text", {"stringValue": "text"}),
        (None, {"isNull": True}),
        (True, {"booleanValue": True}),
        (7, {"longValue": 7}),
        (1.5, {"doubleValue": 1.5}),
    ])
    def test_value_types(self, value, field):
        assert sql_parameter("p", value) == {"name": "p", "value": field}


class TestUpdateStatementBuilder:
    """Test cases for UpdateStatementBuilder."""

    def test_single_assignment(self):
        sql, parameters = (
            UpdateStatementBuilder("things")
            .set_value("name", "Widget")
            .build(where="id = :id::uuid", where_parameters=[sql_parameter("id", "x")])
        )

        assert sql == "UPDATE things SET name = :name WHERE id = :id::uuid"
        assert parameters == [
            {"name": "id", "value": {"stringValue": "x"}},
            {"name": "name", "value": {"stringValue": "Widget"}},
        ]

    def test_assignments_keep_call_order(self):
        sql, parameters = (
            UpdateStatementBuilder("things")
            .set_value("description", None)
            .set_expression("updated_at", "NOW()")
            .set_value("updated_by", "system", placeholder="updatedBy")
            .build(where="id = :id::uuid", where_parameters=[], returning="id, name")
        )

        assert sql == (
            "UPDATE things SET description = :description, updated_at = NOW(), updated_by = :updatedBy "
            "WHERE id = :id::uuid RETURNING id, name"
        )
        assert parameters == [
            {"name": "description", "value": {"isNull": True}},
            {"name": "updatedBy", "value": {"stringValue": "system"}},
        ]

    def test_values_never_reach_sql_text(self):
        sql, _ = (
            UpdateStatementBuilder("things")
            .set_value("name", "'; DROP TABLE things; --")
            .build(where="id = :id::uuid", where_parameters=[])
        )

        assert "DROP" not in sql

    def test_build_without_assignments(self):
        with pytest.raises(ValueError):
            UpdateStatementBuilder("things").build(where="id = :id::uuid", where_parameters=[])
