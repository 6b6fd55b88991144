"""API: camada de borda (HTTP inbound e adapters de saída).

Responsabilidades:
- Receber o webhook do Ko-fi e o disparo do resumo
- Verificar token e sanitizar payloads
- Construir mensagens para o Discord
- Falar com APIs externas (Discord, GitHub Gists)

Subpastas:
- connectors/: adapters HTTP por serviço externo
- payload_builders/: construção das mensagens Discord
- routes/: endpoints HTTP (kofi, summary, health)

NÃO PODE conter: regras do ledger, orquestração de use cases.
"""
