"""
Operaciones CRUD para el modelo Book en la base de datos.
Incluye el alta de libros, el listado paginado con filtros por autor y género,
la búsqueda libre por título o autor y el detalle con la valoración media.
Pensado para ser utilizado por los endpoints de la API y los scripts de datos.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.exceptions import BookNotFoundError, DuplicateTitleError
from ..core.pagination import PageParams
from ..db.errors import is_unique_violation
from ..models.book import Book
from ..schemas.book import (BookCreate, BookDetail, BookListParams, BookPage,
                            BookSchema, BookSearchParams)
from .crud_review import calculate_average_rating, get_reviews_for_book_with_user
from .filters import Criterion, list_criteria, search_criteria, to_sql

logger = logging.getLogger(__name__)

def create_book(db: Session, book: BookCreate) -> Book:
    """
    Da de alta un libro en el catálogo.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book (BookCreate): Datos validados del libro.

    Returns:
        Book: El libro almacenado, con ID y fechas asignadas.

    Raises:
        DuplicateTitleError: Si ya existe un libro con el mismo título.
    """
    db_book = Book(**book.model_dump())
    db.add(db_book)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if not is_unique_violation(e):
            logger.exception(f"Integrity error creating book '{book.title}': {e}")
            raise
        logger.warning(f"Rejected book with duplicate title '{book.title}'")
        raise DuplicateTitleError() from e
    except Exception as e:
        logger.exception(f"Error committing creation of book '{book.title}': {e}")
        db.rollback()
        raise
    db.refresh(db_book)
    logger.info(f"Book {db_book.id} created: '{db_book.title}'")
    return db_book

def _paginate(db: Session, criterion: Criterion, pagination: PageParams) -> BookPage:
    """
    Ejecuta un filtro y devuelve la página pedida junto con el total sin paginar.
    """
    condition = to_sql(Book, criterion)
    stmt = (
        select(Book)
        .where(condition)
        .order_by(Book.id)
        .offset(pagination.offset)
        .limit(pagination.limit)
    )
    books = db.execute(stmt).scalars().all()
    total = db.execute(select(func.count()).select_from(Book).where(condition)).scalar_one()
    return BookPage(
        books=[BookSchema.model_validate(b) for b in books],
        total=total,
        page=pagination.page,
        pages=pagination.page_count(total),
    )

def list_books(db: Session, params: BookListParams) -> BookPage:
    """
    Lista libros paginados, filtrando opcionalmente por autor y género.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        params (BookListParams): Página, límite y filtros (coincidencia parcial,
            sin distinción de mayúsculas, combinados con AND).

    Returns:
        BookPage: Libros de la página, total, número de página y total de páginas.
    """
    return _paginate(db, list_criteria(author=params.author, genre=params.genre), params)

def search_books(db: Session, params: BookSearchParams) -> BookPage:
    """
    Busca libros cuyo título o autor contengan el término indicado.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        params (BookSearchParams): Término de búsqueda, página y límite.

    Returns:
        BookPage: Misma estructura que `list_books`.
    """
    return _paginate(db, search_criteria(params.q), params)

def get_book_by_id(db: Session, book_id: int) -> Optional[Book]:
    """
    Recupera un libro por su ID primario.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book_id (int): ID del libro a recuperar.

    Returns:
        Optional[Book]: El objeto Book si se encuentra, None si no existe.
    """
    return db.get(Book, book_id)

def get_book_detail(db: Session, book_id: int, review_limit: Optional[int] = None) -> BookDetail:
    """
    Obtiene un libro con sus reseñas más recientes y la valoración media de estas.

    La media se calcula solo sobre las reseñas recuperadas (como máximo
    `review_limit`, por defecto BOOK_DETAIL_REVIEW_LIMIT), no sobre todas.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book_id (int): ID del libro.
        review_limit (Optional[int]): Número máximo de reseñas a incluir.

    Returns:
        BookDetail: Libro, valoración media redondeada a un decimal y reseñas.

    Raises:
        BookNotFoundError: Si el libro no existe.
    """
    book = get_book_by_id(db, book_id)
    if book is None:
        raise BookNotFoundError()

    if review_limit is None:
        review_limit = settings.BOOK_DETAIL_REVIEW_LIMIT
    reviews = get_reviews_for_book_with_user(db, book_id=book_id, limit=review_limit)
    return BookDetail(
        book=BookSchema.model_validate(book),
        average_rating=calculate_average_rating([r.rating for r in reviews]),
        reviews=reviews,
    )
