"""Core shared kernel.

Foundational pieces used across all architectural layers:
- Result types for railway-oriented programming
- Application settings
- Dependency container (src.core.container)

The core module has NO dependencies on the domain, application or
presentation layers (the container imports them lazily).
"""

from src.core.enums import Environment
from src.core.result import Failure, Result, Success

__all__ = [
    "Environment",
    "Failure",
    "Result",
    "Success",
]
