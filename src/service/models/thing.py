"""
Thing domain model.

A Thing is read back from the RDS Data API as a positional record, so the
column order below is part of the contract of every SELECT/RETURNING clause
issued by the data access layer.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Fixed column order of every statement that returns a thing
THING_COLUMNS = 'id, name, description, created_at, updated_at, created_by, updated_by'


class Thing(BaseModel):
    """Core Thing domain model, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Annotated[str, Field(
        description='Unique identifier of the thing (canonical UUID)',
        examples=['550e8400-e29b-41d4-a716-446655440000']
    )]

    name: Annotated[str, Field(
        min_length=1,
        description='Trimmed, non-empty name of the thing',
        examples=['Widget']
    )]

    description: Annotated[Optional[str], Field(
        default=None,
        description='Optional description, null when absent'
    )] = None

    created_at: Annotated[str, Field(
        description='Timestamp when the thing was created'
    )]

    updated_at: Annotated[str, Field(
        description='Timestamp when the thing was last updated'
    )]

    created_by: Annotated[str, Field(
        description='Identity that created the thing',
        examples=['system']
    )]

    updated_by: Annotated[str, Field(
        description='Identity that last updated the thing',
        examples=['system']
    )]

    @classmethod
    def from_record(cls, record: list[dict[str, Any]]) -> 'Thing':
        """
        Build a Thing from an RDS Data API record.

        Args:
            record: Field values in THING_COLUMNS order

        Returns:
            Thing instance, with an empty or NULL description mapped to None
        """
        return cls(
            id=record[0]['stringValue'],
            name=record[1]['stringValue'],
            description=record[2].get('stringValue') or None,
            created_at=record[3]['stringValue'],
            updated_at=record[4]['stringValue'],
            created_by=record[5]['stringValue'],
            updated_by=record[6]['stringValue'],
        )
