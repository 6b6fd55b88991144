"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: evento Ko-fi e ledger
- use_cases/: relay de evento e resumo
- services/: classificação, reducer, roteamento e entrega com fallback
- infra/: stores do ledger (gist, memória)
- protocols/: contratos e DTOs
- observability/: correlation_id para logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
