"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los servicios reciben valores ya validados (umbral, rango, semilla).
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="NUMDRILLS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    range_threshold: int = Field(
        default=10,
        description="Mayor valor aceptado por el ejercicio 'below'.",
    )
    target_min: int = Field(
        default=1,
        ge=0,
        description="Límite inferior (inclusive) del número secreto.",
    )
    target_max: int = Field(
        default=100,
        ge=0,
        description="Límite superior (inclusive) del número secreto.",
    )
    seed: int | None = Field(
        default=None,
        description="Semilla fija para el juego de adivinar (reproducible).",
    )

    fibonacci_first: int = Field(
        default=0,
        description="Primer término semilla de la serie.",
    )
    fibonacci_second: int = Field(
        default=1,
        description="Segundo término semilla de la serie.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging cuando no se pasa --verbose.",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner en sesiones interactivas.",
    )

    @model_validator(mode="after")
    def _check_ranges(self) -> "AppSettings":
        if self.target_min > self.target_max:
            raise ValueError(
                f"target_min ({self.target_min}) must not exceed target_max ({self.target_max})"
            )
        level = self.log_level.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        self.log_level = level
        return self
