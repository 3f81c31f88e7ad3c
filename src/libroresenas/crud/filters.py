"""
Predicados de filtrado independientes del almacenamiento.

Los listados combinan filtros por conjunción (`AllOf`) y la búsqueda libre por
disyunción (`AnyOf`). `to_sql` traduce un predicado a una expresión SQLAlchemy
aplicable a cualquier modelo ORM con las columnas referenciadas.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from sqlalchemy import and_, false, or_, true
from sqlalchemy.sql.elements import ColumnElement

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class Equals:
    field: str
    value: object


@dataclass(frozen=True)
class Contains:
    """Coincidencia parcial sin distinción de mayúsculas."""
    field: str
    value: str


@dataclass(frozen=True)
class AllOf:
    criteria: Tuple["Criterion", ...] = ()


@dataclass(frozen=True)
class AnyOf:
    criteria: Tuple["Criterion", ...] = ()


Criterion = Union[Equals, Contains, AllOf, AnyOf]


def list_criteria(author: Optional[str] = None, genre: Optional[str] = None) -> AllOf:
    """
    Construye el filtro de listado del catálogo.

    Args:
        author (Optional[str]): Subcadena a buscar en el autor.
        genre (Optional[str]): Subcadena a buscar en el género.

    Returns:
        AllOf: Conjunción de los filtros presentes; vacía si no hay ninguno.
    """
    criteria = []
    if author:
        criteria.append(Contains("author", author))
    if genre:
        criteria.append(Contains("genre", genre))
    return AllOf(tuple(criteria))


def search_criteria(query: str) -> AnyOf:
    """Título O autor contienen `query`."""
    return AnyOf((Contains("title", query), Contains("author", query)))


def escape_like(value: str) -> str:
    """Escapa los comodines de LIKE para que el valor se compare literalmente."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def _column(model, field: str):
    column = getattr(model, field, None)
    if column is None:
        raise ValueError(f"{model.__name__} has no field '{field}'")
    return column


def to_sql(model, criterion: Criterion) -> ColumnElement:
    """
    Traduce un predicado a una expresión SQLAlchemy sobre `model`.

    Args:
        model: Clase ORM cuyas columnas se referencian.
        criterion (Criterion): Predicado a traducir.

    Returns:
        ColumnElement: Expresión booleana para usar en `where`.

    Raises:
        ValueError: Si el predicado referencia un campo inexistente.
        TypeError: Si el predicado no es de un tipo conocido.
    """
    if isinstance(criterion, Equals):
        return _column(model, criterion.field) == criterion.value
    if isinstance(criterion, Contains):
        pattern = f"%{escape_like(criterion.value)}%"
        return _column(model, criterion.field).ilike(pattern, escape=LIKE_ESCAPE)
    if isinstance(criterion, AllOf):
        if not criterion.criteria:
            return true()
        return and_(*(to_sql(model, c) for c in criterion.criteria))
    if isinstance(criterion, AnyOf):
        if not criterion.criteria:
            return false()
        return or_(*(to_sql(model, c) for c in criterion.criteria))
    raise TypeError(f"Unsupported criterion: {criterion!r}")
