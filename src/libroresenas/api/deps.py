"""Dependencias compartidas por los endpoints: sesión de base de datos e identidad."""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session

from libroresenas.crud.crud_user import authenticate_user
from libroresenas.db.session import get_db

logger = logging.getLogger(__name__)

security = HTTPBasic()


def get_current_user_id(
    credentials: HTTPBasicCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> int:
    """
    Resolve the authenticated user from HTTP Basic credentials (email, password).

    Raises 401 when no valid credential was presented.
    """
    user = authenticate_user(db, email=credentials.username, password=credentials.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return user.id
