import pytest
from unittest.mock import MagicMock
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.main import create_app
from src.application.container import Container
from src.domain.health.service import HealthService
from src.infrastructure.config.settings import Settings


@pytest.fixture
def mock_ledger():
    """Mock del TradeLedger."""
    ledger = MagicMock()
    ledger.count.return_value = 3
    return ledger


def test_health_service_reports_trade_count(mock_ledger):
    service = HealthService(ledger=mock_ledger)

    assert service.check() == {"status": "healthy", "trades": 3}
    mock_ledger.count.assert_called_once()


def test_health_endpoint_counts_recorded_trades():
    container = Container()
    container.config.override(providers.Object(Settings(_env_file=None, seed_sample_trades=True)))

    with TestClient(create_app(container)) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "trades": 2}
