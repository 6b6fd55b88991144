"""Connectors: adapters de borda para APIs externas.

Estrutura:
- kofi/: webhook inbound do Ko-fi (parse, token, sanitização)
- discord/: webhooks de saída (sinks)
- github/: API de Gists (store do ledger)
"""

__all__: list[str] = []
