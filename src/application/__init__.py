"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change state upstream
- Queries: Read operations that fetch data
- Services: Token refresh, optimistic concurrency guard, detail view loader

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- services/: Collaborators shared by several handlers

The application layer orchestrates domain logic and talks to the cloud APIs
only through domain protocols.
"""
