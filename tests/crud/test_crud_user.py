# tests/crud/test_crud_user.py
import pytest
from sqlalchemy.exc import IntegrityError

from libroresenas.crud import authenticate_user, create_user, get_user_by_email
from libroresenas.schemas.user import UserCreate
from libroresenas.models.user import User

def test_create_user_crud(db_session):
    """Test the create_user CRUD function."""
    user_in = UserCreate(email="crud_test@example.com", username="crud", password="password123")

    created_user = create_user(db=db_session, user=user_in)

    assert created_user.email == "crud_test@example.com"
    assert created_user.username == "crud"
    assert created_user.is_active is True
    assert created_user.hashed_password != "password123"
    db_user = db_session.query(User).filter(User.email == "crud_test@example.com").first()
    assert db_user.id == created_user.id

def test_create_user_crud_duplicate(db_session):
    """create_user propagates IntegrityError on duplicate emails."""
    create_user(db=db_session, user=UserCreate(email="dup@example.com", username="first", password="pw"))

    with pytest.raises(IntegrityError):
        create_user(db=db_session, user=UserCreate(email="dup@example.com", username="second", password="pw"))

def test_get_user_by_email(db_session, test_user):
    assert get_user_by_email(db_session, test_user.email).id == test_user.id
    assert get_user_by_email(db_session, "nobody@example.com") is None

def test_authenticate_user(db_session, test_user):
    assert authenticate_user(db_session, test_user.email, "password123").id == test_user.id
    assert authenticate_user(db_session, test_user.email, "wrong") is None
    assert authenticate_user(db_session, "nobody@example.com", "password123") is None

def test_authenticate_inactive_user(db_session, test_user):
    test_user.is_active = False
    db_session.commit()

    assert authenticate_user(db_session, test_user.email, "password123") is None
