"""hubfork type definitions.

This module exports all data model types used by the package.
"""

from hubfork.types.fork import ForkOptions, ForkResult, ForkTarget
from hubfork.types.project import DEFAULT_HOST, HostCredentials, HostedProject
from hubfork.types.repos import ParentRepository, RemoteRepository

__all__ = [
    # Project types
    "DEFAULT_HOST",
    "HostedProject",
    "HostCredentials",
    # Repository types
    "RemoteRepository",
    "ParentRepository",
    # Fork types
    "ForkOptions",
    "ForkTarget",
    "ForkResult",
]
