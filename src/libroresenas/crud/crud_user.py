"""
Operaciones CRUD para el modelo User en la base de datos del sistema LibroReseñas.
Incluye funciones para crear usuarios, obtenerlos por email y autenticarlos.
Pensado para ser utilizado por el proveedor de identidad de la API y los scripts.
"""

import logging
from sqlalchemy.orm import Session
from ..models.user import User
from ..schemas.user import UserCreate
from ..core.security import get_password_hash, verify_password
from typing import Optional

logger = logging.getLogger(__name__)

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """
    Obtiene un usuario por su email.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        email (str): Email del usuario a buscar.

    Returns:
        Optional[User]: El usuario si existe, None si no.
    """
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, user: UserCreate) -> User:
    """
    Crea un nuevo usuario en la base de datos.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        user (UserCreate): Objeto con los datos del usuario a crear.

    Returns:
        User: El usuario creado.

    Raises:
        IntegrityError: Si el email o el nombre de usuario ya existen.
    """
    hashed_password: str = get_password_hash(user.password)
    db_user: User = User(email=user.email, username=user.username, hashed_password=hashed_password)
    db.add(db_user)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_user)
    return db_user

def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """
    Comprueba las credenciales de un usuario.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        email (str): Email con el que se identifica.
        password (str): Contraseña en texto plano.

    Returns:
        Optional[User]: El usuario si las credenciales son válidas y está activo, None si no.
    """
    user = get_user_by_email(db, email)
    if user is None:
        logger.info(f"Failed login attempt for unknown email {email}")
        return None

    verified, new_hash = verify_password(password, user.hashed_password)
    if not verified:
        logger.info(f"Failed login attempt for user {user.id}")
        return None
    if not user.is_active:
        logger.info(f"Inactive user {user.id} tried to authenticate")
        return None

    if new_hash:
        # Hash con parámetros obsoletos: se sustituye por uno actual
        user.hashed_password = new_hash
        db.commit()
        logger.info(f"Password hash of user {user.id} upgraded")
    return user
