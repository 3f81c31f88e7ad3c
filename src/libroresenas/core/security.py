"""
Hasheo de contraseñas para el proveedor de identidad de LibroReseñas.

Las contraseñas se guardan con bcrypt a través de passlib. El coste (rondas)
se toma de la configuración; al autenticar, un hash generado con parámetros
obsoletos se recalcula y se devuelve para que el llamador lo persista.
"""

from typing import Optional, Tuple

from passlib.context import CryptContext

from libroresenas.core.config import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> Tuple[bool, Optional[str]]:
    """
    Verifica una contraseña en texto plano contra su hash.

    Args:
        plain_password (str): Contraseña en texto plano a verificar.
        hashed_password (str): Hash almacenado.

    Returns:
        Tuple[bool, Optional[str]]: (coincide, nuevo hash). El nuevo hash solo
        se devuelve si el almacenado usa un esquema o parámetros obsoletos.
    """
    return pwd_context.verify_and_update(plain_password, hashed_password)
