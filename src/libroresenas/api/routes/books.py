"""Catalog routes: create, list, search and book detail with reviews."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from libroresenas.api.deps import get_current_user_id
from libroresenas.crud import crud_book, crud_review
from libroresenas.db.session import get_db
from libroresenas.schemas.book import (BookCreate, BookDetail, BookListParams,
                                       BookPage, BookSchema, BookSearchParams)
from libroresenas.schemas.review import ReviewCreate, ReviewSchema

router = APIRouter(prefix="/books", tags=["Books"])


@router.post("", response_model=BookSchema, status_code=status.HTTP_201_CREATED)
def create_book(
    book_in: BookCreate,
    db: Session = Depends(get_db),
    _user_id: int = Depends(get_current_user_id),
):
    """Add a book to the catalog."""
    return crud_book.create_book(db, book_in)


@router.get("", response_model=BookPage)
def list_books(
    params: Annotated[BookListParams, Query()],
    db: Session = Depends(get_db),
):
    """Paginated listing, optionally filtered by author and genre."""
    return crud_book.list_books(db, params)


# Registered before /{book_id} so "search" is not taken as an id
@router.get("/search", response_model=BookPage)
def search_books(
    params: Annotated[BookSearchParams, Query()],
    db: Session = Depends(get_db),
):
    """Free-text search over title and author."""
    return crud_book.search_books(db, params)


@router.get("/{book_id}", response_model=BookDetail)
def get_book(book_id: int, db: Session = Depends(get_db)):
    """Book with its latest reviews and their average rating."""
    return crud_book.get_book_detail(db, book_id)


@router.post("/{book_id}/reviews", response_model=ReviewSchema, status_code=status.HTTP_201_CREATED)
def create_review(
    book_id: int,
    review_in: ReviewCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Review a book. Each user can review a book only once."""
    return crud_review.create_review(db, review=review_in, user_id=user_id, book_id=book_id)
