"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy async models, repositories, unit of work
- events/: In-memory event bus
- logging/: structlog console adapter
- email/: Stub and SMTP email senders
- security/: JWT token generator

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
