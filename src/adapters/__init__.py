"""Adaptadores: transporte HTTP (httpx) y exportadores."""
