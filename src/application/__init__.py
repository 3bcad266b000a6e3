"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change account state
- Queries: Read operations (bearer token resolution)
- DTOs: Results handed back to the presentation layer

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Response dataclasses

The application layer orchestrates domain logic but contains no framework code.
"""
