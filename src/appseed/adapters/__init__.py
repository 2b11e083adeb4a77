"""Adaptadores de I/O: registro HTTP, npm, reglas de nombres y disco."""
