"""
Paginación por página/límite para los listados del catálogo.

`PageParams` normaliza los parámetros `page` y `limit` recibidos y calcula el
desplazamiento y el número total de páginas a partir de un conteo sin paginar.
"""

import math

from pydantic import BaseModel, Field, model_validator

from libroresenas.core.config import settings

# Mayor valor que aceptan OFFSET/LIMIT en la base de datos (entero de 64 bits)
MAX_SQL_INTEGER = 2**63 - 1


class PageParams(BaseModel):
    """
    Parámetros de paginación.

    Atributos:
        page (int): Número de página, empezando en 1.
        limit (int): Número máximo de registros por página.
    """
    page: int = Field(1, ge=1, le=MAX_SQL_INTEGER)
    limit: int = Field(settings.DEFAULT_PAGE_LIMIT, ge=1, le=MAX_SQL_INTEGER)

    @model_validator(mode="after")
    def offset_fits_in_store(self):
        if self.offset > MAX_SQL_INTEGER:
            raise ValueError("page is too large for the given limit")
        return self

    @property
    def offset(self) -> int:
        """Registros a omitir antes de la página actual."""
        return (self.page - 1) * self.limit

    def page_count(self, total: int) -> int:
        """
        Calcula el número de páginas para un total de registros.

        Args:
            total (int): Conteo de registros que cumplen el filtro, sin paginar.

        Returns:
            int: ceil(total / limit); 0 si no hay registros.
        """
        return math.ceil(total / self.limit)
