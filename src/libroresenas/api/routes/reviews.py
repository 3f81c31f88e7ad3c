"""Review routes restricted to the review's author."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from libroresenas.api.deps import get_current_user_id
from libroresenas.crud import crud_review
from libroresenas.db.session import get_db
from libroresenas.schemas.review import ReviewSchema, ReviewUpdate

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.put("/{review_id}", response_model=ReviewSchema)
def update_review(
    review_id: int,
    review_in: ReviewUpdate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return crud_review.update_review(db, review_id=review_id, review=review_in, requesting_user_id=user_id)


@router.delete("/{review_id}")
def delete_review(
    review_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> dict[str, str]:
    crud_review.delete_review(db, review_id=review_id, requesting_user_id=user_id)
    return {"message": "Review deleted"}
