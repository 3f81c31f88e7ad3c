"""
Esquemas Pydantic para la entidad Book en la API de LibroReseñas.
Define los modelos de entrada (creación, listado, búsqueda) y de salida
(libro, página de libros y detalle con valoración media).
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from libroresenas.core.pagination import PageParams
from libroresenas.schemas.review import ReviewWithAuthor

class BookBase(BaseModel):
    """
    Campos comunes de un libro.

    Atributos:
        title (str): Título del libro.
        author (str): Autor del libro.
        genre (str): Género literario.
        description (Optional[str]): Sinopsis opcional.
    """
    title: str = Field(..., max_length=255)
    author: str = Field(..., max_length=255)
    genre: str = Field(..., max_length=100)
    description: Optional[str] = None

class BookCreate(BookBase):
    """
    Esquema para dar de alta un libro. Título, autor y género no pueden estar vacíos.
    """
    model_config = ConfigDict(str_strip_whitespace=True, str_min_length=1)

    @field_validator("description", mode="before")
    @classmethod
    def blank_description_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

class BookSchema(BookBase):
    """
    Esquema de salida para un libro, incluyendo identificador y fechas.
    """
    id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)

class BookListParams(PageParams):
    """
    Parámetros de listado: paginación más filtros opcionales por autor y género.
    Un filtro vacío (o solo espacios) equivale a no filtrar.
    """
    author: Optional[str] = None
    genre: Optional[str] = None

    @field_validator("author", "genre")
    @classmethod
    def blank_filter_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None

class BookSearchParams(PageParams):
    """
    Parámetros de búsqueda libre sobre título y autor.

    Atributos:
        q (str): Término de búsqueda, obligatorio y no vacío.
    """
    q: str = Field(..., min_length=1)

    @field_validator("q", mode="before")
    @classmethod
    def strip_query(cls, value):
        return value.strip() if isinstance(value, str) else value

class BookPage(BaseModel):
    """
    Página de resultados de un listado o búsqueda.

    Atributos:
        books (List[BookSchema]): Libros de la página actual.
        total (int): Total de libros que cumplen el filtro, sin paginar.
        page (int): Número de página devuelto.
        pages (int): Número total de páginas.
    """
    books: List[BookSchema]
    total: int
    page: int
    pages: int

class BookDetail(BaseModel):
    """
    Detalle de un libro con sus primeras reseñas y la valoración media de estas.
    """
    book: BookSchema
    average_rating: float = Field(..., alias="averageRating")
    reviews: List[ReviewWithAuthor]

    model_config = ConfigDict(populate_by_name=True)
