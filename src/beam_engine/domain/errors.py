from __future__ import annotations

from typing import Optional


class BeamValidationError(ValueError):
    """
    Error de validación de entradas del motor.

    `field` indica el dato que hay que corregir (para que la UI lo marque).
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidGeometry(BeamValidationError):
    """Dimensiones de sección nulas, negativas o inconsistentes."""


class InvalidLoad(BeamValidationError):
    """Luz, carga o módulo elástico no positivos (o no finitos)."""


class OutOfRangePosition(BeamValidationError):
    """Posición de la carga puntual fuera de [0, L]."""
