"""
CreationGateway implementations.

- HttpFolderGateway: talks to the folder service over HTTP (httpx).
- InMemoryFolderGateway: for testing and local development. Data is lost on
  process restart.
"""

from .http_folder_gateway import HttpFolderGateway
from .in_memory_folder_gateway import InMemoryFolderGateway

__all__ = [
    "HttpFolderGateway",
    "InMemoryFolderGateway",
]
