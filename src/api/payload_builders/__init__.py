"""Payload builders: construção das mensagens enviadas ao Discord.

Estrutura:
- discord/: notificação de evento e resumo (rica + legada)
"""

__all__: list[str] = []
