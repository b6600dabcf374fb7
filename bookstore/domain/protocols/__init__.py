"""Domain protocols (ports)."""

from bookstore.domain.protocols.author_repository import AuthorRepository
from bookstore.domain.protocols.book_repository import BookRepository
from bookstore.domain.protocols.category_repository import CategoryRepository
from bookstore.domain.protocols.email_sender_protocol import EmailSenderProtocol
from bookstore.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from bookstore.domain.protocols.logger_protocol import LoggerProtocol
from bookstore.domain.protocols.page_source_protocol import PageSource
from bookstore.domain.protocols.rating_repository import RatingRepository
from bookstore.domain.protocols.token_generator_protocol import (
    TokenGeneratorProtocol,
    TokenPurpose,
)
from bookstore.domain.protocols.unit_of_work_protocol import UnitOfWork
from bookstore.domain.protocols.user_repository import UserRepository

__all__ = [
    "AuthorRepository",
    "BookRepository",
    "CategoryRepository",
    "EmailSenderProtocol",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "PageSource",
    "RatingRepository",
    "TokenGeneratorProtocol",
    "TokenPurpose",
    "UnitOfWork",
    "UserRepository",
]
