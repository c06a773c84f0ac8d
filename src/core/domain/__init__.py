"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (Pydantic v2 + Enum).
- El dominio no conoce stdin, Rich ni Typer: solo conceptos del problema.
"""
