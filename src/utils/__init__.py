"""Utilitários compartilhados (exceções)."""
