"""Directory ports (read side).

These ports return application DTOs (read models), not domain aggregates.
"""

from storerating.application.ports.directory.directory_read_port import (
    DirectoryReadPort,
)

__all__ = ["DirectoryReadPort"]
