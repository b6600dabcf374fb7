"""Domain layer - Pure business logic.

This layer contains the catalog entities, read models, protocols (ports),
and domain events. The domain layer has NO dependencies on any framework
or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (Book, Author, Category, Rating, User)
- value_objects/: Read models (BookView)
- protocols/: Repository and service interfaces
- events/: Domain events (things that happened in the domain)
"""
