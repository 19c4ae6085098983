"""Modelos, errores y `Result` del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP ni la CLI: solo artistas, tokens y reportes.
"""
