# ruff: noqa: E501 - Long import paths in __init__.py re-exports
from storerating.infrastructure.persistence.sqlalchemy.adapters.directory.sqlalchemy_directory_read_adapter import (
    SqlAlchemyDirectoryReadAdapter,
)

__all__ = ["SqlAlchemyDirectoryReadAdapter"]
