"""Modelos y valores del dominio Hexbot.

Por qué:
- Aquí viven los parámetros validados (count, width/height, seed) y los
  modelos de la respuesta (Pydantic v2).
- El dominio no conoce HTTP ni CLI: solo conceptos del API.
"""
