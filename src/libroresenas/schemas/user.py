"""
Esquemas Pydantic para la entidad User en LibroReseñas.
Define el modelo de entrada para validar los datos de un usuario nuevo.
"""

from pydantic import BaseModel, EmailStr, Field

class UserCreate(BaseModel):
    """
    Esquema para la creación de un usuario.

    Atributos:
        email (EmailStr): Correo electrónico del usuario.
        username (str): Nombre visible del usuario.
        password (str): Contraseña en texto plano (será hasheada antes de almacenar).
    """
    email: EmailStr
    username: str = Field(..., min_length=1, max_length=50)
    password: str
