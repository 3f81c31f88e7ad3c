"""Clasificación de los errores de integridad devueltos por la base de datos."""

from sqlalchemy.exc import IntegrityError

# SQLite: "UNIQUE constraint failed"; PostgreSQL: "duplicate key value violates
# unique constraint"; MySQL: "Duplicate entry"
UNIQUE_VIOLATION_MARKERS = ("unique constraint", "duplicate key", "duplicate entry")


def is_unique_violation(error: IntegrityError) -> bool:
    """
    Indica si el error procede de una restricción de unicidad.

    Args:
        error (IntegrityError): Error lanzado por SQLAlchemy al confirmar.

    Returns:
        bool: True para violaciones de UNIQUE; False para CHECK, NOT NULL o claves foráneas.
    """
    message = str(error.orig).lower()
    return any(marker in message for marker in UNIQUE_VIOLATION_MARKERS)
