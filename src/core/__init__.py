"""Core: dominio, contratos, servicios y configuración.

No depende de la CLI ni de los adaptadores de exportación.
"""
