"""Core: dominio, configuración, errores y servicios puros."""
