from .crud_user import get_user_by_email, create_user, authenticate_user
from .crud_review import (
    calculate_average_rating,
    create_review,
    get_reviews_for_book_with_user,
    get_review_by_id,
    update_review,
    delete_review,
)
from .crud_book import (
    create_book,
    list_books,
    search_books,
    get_book_by_id,
    get_book_detail,
)

__all__ = [
    "get_user_by_email",
    "create_user",
    "authenticate_user",
    "calculate_average_rating",
    "create_review",
    "get_reviews_for_book_with_user",
    "get_review_by_id",
    "update_review",
    "delete_review",
    "create_book",
    "list_books",
    "search_books",
    "get_book_by_id",
    "get_book_detail",
]
