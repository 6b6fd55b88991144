"""Conector GitHub: API de Gists."""

from .gist_client import GistClient, create_gist_client

__all__ = ["GistClient", "create_gist_client"]
