"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los clientes HTTP.
- El Core depende de abstracciones, no de httpx.
"""
