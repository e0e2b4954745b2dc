"""Adaptadores de infraestructura: ficheros JSON de entrada y exportadores (JSON/HTML/PDF)."""
