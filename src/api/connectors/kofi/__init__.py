"""Conector Ko-fi (webhook inbound)."""
