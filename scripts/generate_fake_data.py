"""
Script para generación de datos falsos en la base de datos de LibroReseñas.

Este módulo crea usuarios, libros y reseñas de prueba utilizando Faker y las
funciones CRUD del proyecto. Está pensado para poblar entornos de desarrollo
o pruebas con datos realistas y variados.

Uso:
    Ejecutar directamente este script para poblar la base de datos con
    usuarios, libros y reseñas aleatorias. Las tablas se crean si no existen.

Nota:
    - Los usuarios generados tendrán una contraseña común definida en FAKE_PASSWORD.
    - Los títulos y reseñas duplicados se registran y se omiten.
"""

import random
import logging
from typing import List, Optional

from faker import Faker
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from libroresenas.core.config import settings
from libroresenas.core.exceptions import DuplicateReviewError, DuplicateTitleError
from libroresenas.crud.crud_book import create_book
from libroresenas.crud.crud_review import create_review
from libroresenas.crud.crud_user import create_user, get_user_by_email
from libroresenas.db.session import SessionLocal, init_db
from libroresenas.schemas.book import BookCreate
from libroresenas.schemas.review import ReviewCreate
from libroresenas.schemas.user import UserCreate

logger = logging.getLogger(__name__)

NUM_FAKE_USERS: int = 20
NUM_FAKE_BOOKS: int = 40
MAX_REVIEWS_PER_USER: int = 15
MIN_REVIEWS_PER_USER: int = 2
FAKE_PASSWORD: str = "password123"
GENRES: List[str] = ["Fantasy", "Science Fiction", "Mystery", "Romance", "History", "Poetry", "Thriller"]

def _create_users(db: Session, fake: Faker, num_users: int) -> List[int]:
    user_ids: List[int] = []
    for i in range(num_users):
        fake_email: str = fake.unique.safe_email()
        existing_user = get_user_by_email(db, email=fake_email)
        if existing_user:
            logger.info(f"  ({i+1}/{num_users}) Usuario Encontrado: {existing_user.email} (ID: {existing_user.id})")
            user_ids.append(existing_user.id)
            continue

        user_in = UserCreate(email=fake_email, username=fake.unique.user_name()[:50], password=FAKE_PASSWORD)
        try:
            new_user = create_user(db=db, user=user_in)
        except IntegrityError:
            logger.warning(f"  ({i+1}/{num_users}) Error de integridad al crear {fake_email}, se omite.")
            continue
        user_ids.append(new_user.id)
        logger.info(f"  ({i+1}/{num_users}) Usuario Creado: {new_user.email} (ID: {new_user.id})")
    return user_ids

def _create_books(db: Session, fake: Faker, num_books: int) -> List[int]:
    book_ids: List[int] = []
    for i in range(num_books):
        book_in = BookCreate(
            title=fake.unique.catch_phrase()[:255],
            author=fake.name(),
            genre=random.choice(GENRES),
            description=fake.paragraph(nb_sentences=3) if random.random() < 0.8 else None,
        )
        try:
            book = create_book(db, book_in)
        except DuplicateTitleError:
            logger.warning(f"  ({i+1}/{num_books}) Título duplicado '{book_in.title}', se omite.")
            continue
        book_ids.append(book.id)
    logger.info(f"Se crearon {len(book_ids)} libros.")
    return book_ids

def generate_data(
    db: Session,
    num_users: int = NUM_FAKE_USERS,
    num_books: int = NUM_FAKE_BOOKS,
    max_reviews_per_user: int = MAX_REVIEWS_PER_USER,
    seed: Optional[int] = None,
) -> int:
    """
    Genera usuarios, libros y reseñas falsas en la base de datos.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        num_users (int): Usuarios a crear.
        num_books (int): Libros a crear.
        max_reviews_per_user (int): Máximo de reseñas por usuario.
        seed (Optional[int]): Semilla para obtener datos reproducibles.

    Returns:
        int: Total de reseñas creadas.
    """
    fake = Faker(['es_ES', 'en_US'])
    if seed is not None:
        Faker.seed(seed)
        random.seed(seed)

    logger.info(f"--- Fase 1: Creando {num_users} Usuarios Falsos ---")
    user_ids = _create_users(db, fake, num_users)

    logger.info(f"--- Fase 2: Creando {num_books} Libros Falsos ---")
    book_ids = _create_books(db, fake, num_books)
    if not user_ids or not book_ids:
        logger.error("No hay usuarios o libros disponibles. No se pueden generar reseñas.")
        return 0

    logger.info(f"--- Fase 3: Generando Reseñas Falsas ({MIN_REVIEWS_PER_USER}-{max_reviews_per_user} por usuario) ---")
    total_reviews_added: int = 0
    for user_id in user_ids:
        upper = min(max_reviews_per_user, len(book_ids))
        num_reviews: int = random.randint(min(MIN_REVIEWS_PER_USER, upper), upper)
        for book_id in random.sample(book_ids, num_reviews):
            fake_comment_text: Optional[str] = fake.paragraph(nb_sentences=random.randint(1, 4)) if random.random() < 0.7 else None
            review_in = ReviewCreate(rating=random.randint(1, 5), comment=fake_comment_text)
            try:
                create_review(db=db, review=review_in, user_id=user_id, book_id=book_id)
            except DuplicateReviewError:
                logger.warning(f"  User {user_id} ya tenía reseña para Book {book_id}, se omite.")
                continue
            total_reviews_added += 1

    logger.info(f"--- Fase 3 Completada: Total reseñas falsas añadidas: {total_reviews_added} ---")
    return total_reviews_added

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.info("=============================================")
    logger.info(" Iniciando script de generación de datos falsos")
    logger.info("=============================================")
    init_db()
    session = SessionLocal()
    try:
        generate_data(session)
    except Exception as e:
        logger.exception(f"Error CRÍTICO durante la generación de datos: {e}")
        session.rollback()
        raise
    finally:
        logger.info("Cerrando sesión de base de datos.")
        session.close()
    logger.info("============================================")
    logger.info(" Script de Generación de Datos Finalizado")
    logger.info("============================================")
