"""
Modelo ORM para la entidad Book en la base de datos de LibroReseñas.
Define los campos principales de un libro y su relación con las reseñas.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, func
from sqlalchemy.orm import relationship
from libroresenas.db.session import Base

class Book(Base):
    """
    Representa un libro del catálogo.

    Atributos:
        id (int): Identificador primario del libro.
        title (str): Título del libro, único en todo el catálogo.
        author (str): Autor del libro.
        genre (str): Género literario.
        description (str): Descripción o sinopsis del libro (opcional).
        created_at (datetime): Fecha de alta del libro.
        updated_at (datetime): Fecha de última modificación.
        reviews (List[Review]): Lista de reseñas asociadas al libro.

    La valoración media no se almacena: se calcula al leer el detalle del libro.
    """
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), unique=True, index=True, nullable=False)
    author = Column(String(255), index=True, nullable=False)
    genre = Column(String(100), index=True, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    reviews = relationship(
        "Review",
        back_populates="book",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """
        Representación legible del objeto Book para depuración.

        Returns:
            str: Cadena representando el libro.
        """
        return f"<Book(id={self.id}, title='{self.title[:30]}...', author='{self.author}')>"
