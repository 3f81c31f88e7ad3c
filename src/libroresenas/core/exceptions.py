"""Domain exceptions raised by the catalog and review operations."""


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    message = "Catalog error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class NotFoundError(CatalogError):
    """Referenced record does not exist."""
    message = "Not found"


class BookNotFoundError(NotFoundError):
    message = "Book not found"


class ReviewNotFoundError(NotFoundError):
    message = "Review not found"


class ForbiddenError(CatalogError):
    """Authenticated user is not allowed to act on the record."""
    message = "Not authorized"


class ReviewPermissionError(ForbiddenError):
    """User is not the author of the review."""
    message = "Not authorized to modify this review"


class DuplicateError(CatalogError):
    """A uniqueness constraint of the store was violated."""
    message = "Duplicate record"


class DuplicateTitleError(DuplicateError):
    message = "A book with this title already exists"


class DuplicateReviewError(DuplicateError):
    message = "You have already reviewed this book"
