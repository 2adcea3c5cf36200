"""
RDS Data API implementation of the Data Access Layer (DAL).

Every method issues one parameterized statement through ``execute_statement``
and maps the returned records positionally (see THING_COLUMNS). Nothing is
retried and no transaction spans two calls.
"""

from typing import Any, Dict, List, Optional

import boto3

from service.dal import BaseDalHandler
from service.dal.statements import UpdateStatementBuilder, sql_parameter
from service.handlers.utils.observability import logger, tracer
from service.models.thing import THING_COLUMNS, Thing

THINGS_TABLE = 'things'


class RdsDataThingsHandler(BaseDalHandler):
    """Things persistence through the Aurora Data API."""

    def __init__(
        self,
        cluster_arn: str,
        secret_arn: str,
        database: str,
        client: Any = None,
    ) -> None:
        """
        Initialize the RDS Data API handler.

        Args:
            cluster_arn: ARN of the Aurora cluster
            secret_arn: ARN of the secret holding the database credentials
            database: Database name
            client: rds-data client; a new boto3 client when omitted
        """
        super().__init__(THINGS_TABLE)
        self.cluster_arn = cluster_arn
        self.secret_arn = secret_arn
        self.database = database
        self.client = client or boto3.client('rds-data')
        logger.debug(f'RDS Data API handler initialized for database: {database}')

    def _execute(self, sql: str, parameters: Optional[List[Dict[str, Any]]] = None) -> List[List[Dict[str, Any]]]:
        kwargs: Dict[str, Any] = {
            'resourceArn': self.cluster_arn,
            'secretArn': self.secret_arn,
            'database': self.database,
            'sql': sql,
        }
        if parameters:
            kwargs['parameters'] = parameters

        response = self.client.execute_statement(**kwargs)
        return response.get('records') or []

    @tracer.capture_method
    def create_thing(self, thing_id: str, name: str, description: Optional[str], actor: str) -> Optional[Thing]:
        """
        Insert a thing and return the stored row.

        Returns:
            The created Thing, or None if the insert returned no row
        """
        records = self._execute(
            f'INSERT INTO {self.table_name} (id, name, description, created_by, updated_by) '
            f'VALUES (:id::uuid, :name, :description, :createdBy, :updatedBy) '
            f'RETURNING {THING_COLUMNS}',
            [
                sql_parameter('id', thing_id),
                sql_parameter('name', name),
                sql_parameter('description', description or None),
                sql_parameter('createdBy', actor),
                sql_parameter('updatedBy', actor),
            ],
        )
        if not records:
            logger.error(f'Insert returned no row for thing: {thing_id}')
            return None

        logger.info(f'Successfully created thing in database: {thing_id}')
        tracer.put_annotation('thing_created', thing_id)
        return Thing.from_record(records[0])

    @tracer.capture_method
    def get_thing_by_id(self, thing_id: str) -> Optional[Thing]:
        records = self._execute(
            f'SELECT {THING_COLUMNS} FROM {self.table_name} WHERE id = :id::uuid',
            [sql_parameter('id', thing_id)],
        )
        if not records:
            logger.info(f'Thing not found: {thing_id}')
            return None
        return Thing.from_record(records[0])

    @tracer.capture_method
    def list_things(self) -> List[Thing]:
        """Return every thing, most recently created first."""
        records = self._execute(f'SELECT {THING_COLUMNS} FROM {self.table_name} ORDER BY created_at DESC')
        return [Thing.from_record(record) for record in records]

    @tracer.capture_method
    def update_thing(self, thing_id: str, changes: Dict[str, Optional[str]], actor: str) -> Optional[Thing]:
        """
        Apply a partial update.

        Only the columns present in ``changes`` are written; updated_at and
        updated_by are always refreshed.

        Returns:
            The updated Thing, or None if no row matched
        """
        builder = UpdateStatementBuilder(self.table_name)
        if 'name' in changes:
            builder.set_value('name', changes['name'])
        if 'description' in changes:
            builder.set_value('description', changes['description'] or None)
        builder.set_expression('updated_at', 'NOW()')
        builder.set_value('updated_by', actor, placeholder='updatedBy')

        sql, parameters = builder.build(
            where='id = :id::uuid',
            where_parameters=[sql_parameter('id', thing_id)],
            returning=THING_COLUMNS,
        )
        records = self._execute(sql, parameters)
        if not records:
            logger.info(f'Thing not found for update: {thing_id}')
            return None

        logger.info(f'Successfully updated thing: {thing_id}', extra={'columns': list(changes)})
        tracer.put_annotation('thing_updated', thing_id)
        return Thing.from_record(records[0])

    @tracer.capture_method
    def thing_exists(self, thing_id: str) -> bool:
        records = self._execute(
            f'SELECT id FROM {self.table_name} WHERE id = :id::uuid',
            [sql_parameter('id', thing_id)],
        )
        return bool(records)

    @tracer.capture_method
    def delete_thing_by_id(self, thing_id: str) -> None:
        self._execute(
            f'DELETE FROM {self.table_name} WHERE id = :id::uuid',
            [sql_parameter('id', thing_id)],
        )
        logger.info(f'Successfully deleted thing: {thing_id}')
        tracer.put_annotation('thing_deleted', thing_id)
