"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras: método, request, outcome y errores.
- El dominio no conoce httpx, pydantic ni la CLI: solo conceptos del problema.
"""
