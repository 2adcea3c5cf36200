"""
Parameterized statement helpers for the RDS Data API.

Values never end up in SQL text: every assignment is a ``column = :placeholder``
pair with the value sent separately as a named SqlParameter.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


def sql_parameter(name: str, value: Any) -> Dict[str, Any]:
    """Build an RDS Data API SqlParameter for a Python value."""
    if value is None:
        return {'name': name, 'value': {'isNull': True}}
    if isinstance(value, bool):
        return {'name': name, 'value': {'booleanValue': value}}
    if isinstance(value, int):
        return {'name': name, 'value': {'longValue': value}}
    if isinstance(value, float):
        return {'name': name, 'value': {'doubleValue': value}}
    return {'name': name, 'value': {'stringValue': str(value)}}


@dataclass
class Assignment:
    column: str
    expression: str
    parameter: Optional[Dict[str, Any]] = None


@dataclass
class UpdateStatementBuilder:
    """
    Accumulates SET assignments for a single UPDATE statement.

    Assignments are rendered in the order they were added.
    """

    table: str
    assignments: List[Assignment] = field(default_factory=list)

    def set_value(self, column: str, value: Any, placeholder: Optional[str] = None) -> 'UpdateStatementBuilder':
        """Assign a bound value to a column."""
        placeholder = placeholder or column
        self.assignments.append(Assignment(column, f':{placeholder}', sql_parameter(placeholder, value)))
        return self

    def set_expression(self, column: str, expression: str) -> 'UpdateStatementBuilder':
        """Assign a fixed SQL expression, such as NOW(), to a column."""
        self.assignments.append(Assignment(column, expression))
        return self

    def build(
        self,
        where: str,
        where_parameters: List[Dict[str, Any]],
        returning: Optional[str] = None,
    ) -> Tuple[str, List[Dict[str, Any]]]:
        """
        Render the statement.

        Args:
            where: WHERE clause body, using named placeholders
            where_parameters: Parameters bound by the WHERE clause
            returning: Optional RETURNING column list

        Returns:
            The SQL text and its full parameter list

        Raises:
            ValueError: If no assignment was added
        """
        if not self.assignments:
            raise ValueError(f'UPDATE {self.table} has no columns to set')

        set_clause = ', '.join(f'{a.column} = {a.expression}' for a in self.assignments)
        sql = f'UPDATE {self.table} SET {set_clause} WHERE {where}'
        if returning:
            sql = f'{sql} RETURNING {returning}'

        parameters = list(where_parameters)
        parameters.extend(a.parameter for a in self.assignments if a.parameter is not None)
        return sql, parameters
