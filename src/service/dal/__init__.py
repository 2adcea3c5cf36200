"""
Data Access Layer (DAL) for the Things service.

This module provides the data access layer interface and the process-wide
default handler used by the Lambda entry points. Handlers accept an explicit
``dal`` argument, so the default is only built when nothing is injected.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from service.models.thing import Thing


class BaseDalHandler(ABC):
    """Abstract base class for data access layer implementations."""

    def __init__(self, table_name: str) -> None:
        """
        Initialize the DAL handler.

        Args:
            table_name: Name of the database table
        """
        self.table_name = table_name

    @abstractmethod
    def create_thing(self, thing_id: str, name: str, description: Optional[str], actor: str) -> Optional[Thing]:
        """Create a new thing and return the stored row."""

    @abstractmethod
    def get_thing_by_id(self, thing_id: str) -> Optional[Thing]:
        """Retrieve a thing by its ID."""

    @abstractmethod
    def list_things(self) -> list[Thing]:
        """List all things, most recent first."""

    @abstractmethod
    def update_thing(self, thing_id: str, changes: Dict[str, Optional[str]], actor: str) -> Optional[Thing]:
        """Update the given columns of a thing and return the stored row."""

    @abstractmethod
    def thing_exists(self, thing_id: str) -> bool:
        """Check whether a thing exists."""

    @abstractmethod
    def delete_thing_by_id(self, thing_id: str) -> None:
        """Delete a thing by its ID."""


# Created on first use and reused by every invocation of a warm container
_dal_handler: Optional[BaseDalHandler] = None


def get_dal_handler() -> BaseDalHandler:
    """
    Get or create the process-wide DAL handler.

    Returns:
        RDS Data API handler configured from the environment
    """
    global _dal_handler

    if _dal_handler is None:
        # Import here to avoid circular imports
        from service.dal.rds_data_handler import RdsDataThingsHandler
        from service.handlers.models.env_vars import get_handler_env_vars

        env_vars = get_handler_env_vars()
        _dal_handler = RdsDataThingsHandler(
            cluster_arn=env_vars.DB_CLUSTER_ARN,
            secret_arn=env_vars.DB_SECRET_ARN,
            database=env_vars.DB_NAME,
        )

    return _dal_handler


__all__ = [
    'BaseDalHandler',
    'get_dal_handler',
]
