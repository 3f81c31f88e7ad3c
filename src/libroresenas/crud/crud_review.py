from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from sqlalchemy.orm import Session
from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
import logging

from ..core.exceptions import BookNotFoundError, ReviewNotFoundError, ReviewPermissionError, DuplicateReviewError
from ..db.errors import is_unique_violation
from ..models.review import Review
from ..models.user import User
from ..models.book import Book
from ..schemas.review import ReviewCreate, ReviewUpdate, ReviewSchema, ReviewWithAuthor

logger = logging.getLogger(__name__)


def calculate_average_rating(ratings: Sequence[int]) -> float:
    """
    Mean of the given ratings rounded half-up to one decimal place.
    Returns 0 when there are no ratings.
    """
    if not ratings:
        return 0.0
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return float(mean.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def create_review(db: Session, review: ReviewCreate, user_id: int, book_id: int) -> Review:
    """
    Creates a review of `book_id` by `user_id`.

    The (user, book) uniqueness is left to the database constraint: the insert
    is always attempted and a violation is reported as DuplicateReviewError.
    Raises BookNotFoundError if the book does not exist.
    """
    if db.get(Book, book_id) is None:
        logger.warning(f"User {user_id} tried to review non-existent book ID: {book_id}")
        raise BookNotFoundError()

    db_review = Review(
        **review.model_dump(),
        user_id=user_id,
        book_id=book_id,
    )
    db.add(db_review)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if not is_unique_violation(e):
            logger.exception(f"Integrity error creating review for book {book_id}: {e}")
            raise
        logger.info(f"User {user_id} already reviewed book {book_id}")
        raise DuplicateReviewError() from e
    except Exception as e:
        logger.exception(f"Error committing review creation for book {book_id}: {e}")
        db.rollback()
        raise # Re-raise the exception after rollback

    db.refresh(db_review)
    logger.info(f"Review {db_review.id} created for book {book_id} by user {user_id}.")
    return db_review


def get_reviews_for_book_with_user(db: Session, book_id: int, limit: int = 10) -> list[ReviewWithAuthor]:
    """Gets the latest `limit` reviews of a book with the author's username."""
    rows = db.query(Review, User.username).\
            join(User, Review.user_id == User.id).\
            filter(Review.book_id == book_id).\
            order_by(desc(Review.created_at), desc(Review.id)).\
            limit(limit).all()
    return [
        ReviewWithAuthor(**ReviewSchema.model_validate(review).model_dump(), username=username)
        for review, username in rows
    ]


def get_review_by_id(db: Session, review_id: int) -> Review | None:
    return db.get(Review, review_id)


def _get_owned_review(db: Session, review_id: int, requesting_user_id: int) -> Review:
    """
    Fetches a review and checks that `requesting_user_id` is its author.
    Raises ReviewNotFoundError or ReviewPermissionError.
    """
    db_review = get_review_by_id(db, review_id)

    if not db_review:
        logger.warning(f"Attempted access to non-existent review ID: {review_id}")
        raise ReviewNotFoundError()

    # --- Permission Check ---
    if db_review.user_id != requesting_user_id:
        logger.error(f"Unauthorized attempt: User {requesting_user_id} tried to modify review {review_id} owned by {db_review.user_id}")
        raise ReviewPermissionError()

    return db_review


def update_review(db: Session, review_id: int, review: ReviewUpdate, requesting_user_id: int) -> Review:
    """
    Replaces rating and comment of a review owned by `requesting_user_id`.
    An omitted comment clears the stored one.
    """
    db_review = _get_owned_review(db, review_id, requesting_user_id)

    db_review.rating = review.rating
    db_review.comment = review.comment
    db.add(db_review)

    try:
        db.commit()
    except Exception as e:
        logger.exception(f"Error committing update for review ID {review_id}: {e}")
        db.rollback()
        raise

    db.refresh(db_review)
    logger.info(f"Review {review_id} updated by user {requesting_user_id}.")
    return db_review


def delete_review(db: Session, review_id: int, requesting_user_id: int) -> None:
    """
    Permanently deletes a review owned by `requesting_user_id`.
    """
    db_review = _get_owned_review(db, review_id, requesting_user_id)

    try:
        db.delete(db_review)
        db.commit()
    except Exception as e:
        logger.exception(f"Error committing delete for review ID {review_id}: {e}")
        db.rollback()
        raise

    logger.info(f"Review {review_id} deleted by user {requesting_user_id}.")
