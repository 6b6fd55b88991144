"""Configuração do pytest para o projeto Ko-fi Relay."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ (imports absolutos) e a raiz (tests.fakes) ao PYTHONPATH
root_path = Path(__file__).parent.parent
for path in (root_path, root_path / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture
def kofi_payload() -> dict[str, object]:
    """Payload Ko-fi de doação avulsa (antes da sanitização)."""
    return {
        "verification_token": "kofi-secret",
        "message_id": "msg-001",
        "timestamp": "2026-10-01T12:00:00Z",
        "type": "Donation",
        "is_public": True,
        "from_name": "Alice",
        "message": "Keep it up!",
        "amount": "5.00",
        "url": "https://ko-fi.com/Home/CoffeeShop?txid=00000000",
        "email": "alice@example.com",
        "currency": "USD",
        "is_subscription_payment": False,
        "is_first_subscription_payment": False,
        "kofi_transaction_id": "00000000-1111-2222-3333-444444444444",
        "shipping": {"full_name": "Alice"},
        "tier_name": None,
    }
