"""Application ports (read side)."""

from storerating.application.ports.directory import DirectoryReadPort

__all__ = ["DirectoryReadPort"]
