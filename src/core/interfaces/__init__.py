"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) para transporte, decoder y validador de URL.
- Permite invertir dependencias: el executor depende de abstracciones.
"""
