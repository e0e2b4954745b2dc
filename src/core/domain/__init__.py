"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los tipos de valor puros (Pydantic v2): colores, ratios y
  resultados de cumplimiento WCAG.
- El dominio no conoce CLI, ficheros ni plantillas: solo conceptos del problema.
"""
