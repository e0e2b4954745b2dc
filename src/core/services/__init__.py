"""Servicios del Core: motor de color (conversión + comparación), paletas y auditorías."""
