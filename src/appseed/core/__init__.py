"""Core de appseed: dominio, contratos y servicios sin detalles de CLI."""
