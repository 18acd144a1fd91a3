"""Infrastructure layer for the tabular codec.

This layer contains the codec adapters, file storage and logging. It
implements the ports defined in the application layer.
"""

from .container import DependencyContainer, create_default_container

__all__ = [
    "DependencyContainer",
    "create_default_container",
]
