"""
Esquemas Pydantic para la entidad Review en la API de LibroReseñas.
Define los modelos de entrada y salida para validación y serialización de reseñas.
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
import datetime
from typing import Optional

class ReviewBase(BaseModel):
    """
    Esquema base para una reseña, usado como base para creación y visualización.

    Atributos:
        rating (int): Calificación entre 1 y 5.
        comment (Optional[str]): Comentario opcional de la reseña.
    """
    rating: int = Field(..., ge=1, le=5)
    comment: Optional[str] = None

    @field_validator("rating", mode="before")
    @classmethod
    def reject_bool_rating(cls, value):
        # bool es subclase de int: true llegaría como 1
        if isinstance(value, bool):
            raise ValueError("rating must be an integer between 1 and 5")
        return value

class ReviewCreate(ReviewBase):
    """
    Esquema para la creación de una reseña.
    user_id y book_id se gestionan aparte; el comentario se recorta.
    """

    @field_validator("comment")
    @classmethod
    def strip_comment(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else None

class ReviewUpdate(ReviewCreate):
    """
    Esquema para editar una reseña. Reemplaza rating y comentario completos:
    omitir el comentario lo borra.
    """
    pass

class ReviewSchema(ReviewBase):
    """
    Esquema de salida para una reseña, incluyendo campos adicionales.

    Atributos:
        id (int): ID de la reseña.
        user_id (int): ID del usuario que hizo la reseña.
        book_id (int): ID del libro reseñado.
        created_at (datetime.datetime): Fecha de creación de la reseña.
        updated_at (datetime.datetime): Fecha de la última edición.
    """
    id: int
    user_id: int
    book_id: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)

class ReviewWithAuthor(ReviewSchema):
    """
    Reseña acompañada del nombre visible de su autor.
    """
    username: str
