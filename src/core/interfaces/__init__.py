"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que cumplen modelos del dominio y adaptadores.
- El ranking por similitud depende de la forma del candidato, no de su clase.
"""
