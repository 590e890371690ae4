"""Servicios puros del Core (sin I/O)."""
