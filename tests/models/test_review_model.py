# tests/models/test_review_model.py
import pytest
from sqlalchemy.exc import IntegrityError

from libroresenas.models.review import Review

def test_create_review(db_session, test_user, test_book):
    """Test creating a valid Review instance."""
    review = Review(rating=4, comment="This is a test review.", user_id=test_user.id, book_id=test_book.id)
    db_session.add(review)
    db_session.commit()

    retrieved_review = db_session.query(Review).filter(
        Review.user_id == test_user.id, Review.book_id == test_book.id
    ).first()

    assert retrieved_review is not None
    assert retrieved_review.rating == 4
    assert retrieved_review.comment == "This is a test review."
    assert retrieved_review.id is not None
    assert retrieved_review.created_at is not None

    # Test relationship access
    assert retrieved_review.user == test_user
    assert retrieved_review.book == test_book
    assert retrieved_review in test_book.reviews

@pytest.mark.parametrize("rating", [0, 6])
def test_create_review_rating_out_of_range(db_session, test_user, test_book, rating):
    """The CHECK constraint rejects ratings outside 1..5."""
    db_session.add(Review(rating=rating, user_id=test_user.id, book_id=test_book.id))
    with pytest.raises(IntegrityError):
        db_session.commit()

def test_create_review_duplicate_user_book(db_session, test_user, test_book):
    """A user can only review a book once."""
    db_session.add(Review(rating=5, user_id=test_user.id, book_id=test_book.id))
    db_session.commit()

    db_session.add(Review(rating=1, user_id=test_user.id, book_id=test_book.id))
    with pytest.raises(IntegrityError):
        db_session.commit()

def test_review_repr(db_session, test_user, test_book):
    review = Review(rating=3, user_id=test_user.id, book_id=test_book.id)
    db_session.add(review)
    db_session.commit()

    assert repr(review) == f"<Review(id={review.id}, book_id={test_book.id}, user_id={test_user.id}, rating=3)>"
