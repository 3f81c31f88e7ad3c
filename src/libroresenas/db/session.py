"""
Configuración y utilidades para la gestión de la sesión de base de datos SQLAlchemy en LibroReseñas.
Incluye la creación del motor, la fábrica de sesiones y la clase base para los modelos ORM.
Proporciona una función de dependencia para obtener y cerrar sesiones de base de datos de forma segura.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from libroresenas.core.config import settings

# FastAPI ejecuta los endpoints síncronos en un threadpool
connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.SQL_ECHO,
    connect_args=connect_args,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """
    Proporciona una sesión de base de datos para su uso en dependencias de FastAPI.

    Yields:
        Session: Sesión de base de datos SQLAlchemy.

    Ensures:
        La sesión se cierra correctamente después de su uso.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db(bind=None) -> None:
    """
    Crea todas las tablas registradas en Base si todavía no existen.

    Args:
        bind: Motor o conexión a usar. Por defecto, el motor global.
    """
    # Registra los modelos en Base.metadata antes de crear las tablas
    from libroresenas.models import book, review, user  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
