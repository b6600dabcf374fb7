"""Application layer - Use cases and orchestration.

This layer contains the catalog use cases following the CQRS pattern:
- Commands: Write operations that change catalog state
- Queries: Read operations that return paged projections
- Event Handlers: React to account-lifecycle domain events

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- event_handlers/: Notification handlers (domain event reactions)
- cqrs/: Registry mapping requests to handlers
- dispatcher.py: Routes requests to handlers and events to subscribers
- pagination.py: Generic paging over ordered sources
"""
