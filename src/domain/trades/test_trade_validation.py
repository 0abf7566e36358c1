import pytest

from src.domain.trades.dtos.trade_dto import TradeCreateDTO
from src.domain.trades.validation import validate_trade_request
from src.commons.enums.trade_enums import ExchangeEnum, TradeSideEnum


def create_request(**overrides) -> TradeCreateDTO:
    """Helper para crear requests de prueba."""
    fields = dict(
        exchange=ExchangeEnum.BINANCE,
        base_asset="BTC",
        quote_asset="USDT",
        side=TradeSideEnum.BUY,
        amount="0.5",
    )
    fields.update(overrides)
    return TradeCreateDTO(**fields)


# ==================== TESTS DE AMOUNT ====================


@pytest.mark.parametrize("amount", ["0.5", "1", "2.0", "0.00000001", "1e3", "+1", ".5", "5."])
def test_positive_amount_is_valid(amount):
    result = validate_trade_request(create_request(amount=amount))

    assert result.ok
    assert result.errors == []


@pytest.mark.parametrize("amount", ["0", "0.0", "-1", "-0.5"])
def test_non_positive_amount_is_invalid(amount):
    result = validate_trade_request(create_request(amount=amount))

    assert not result.ok
    assert "amount must be positive" in result.errors[0]


@pytest.mark.parametrize(
    "amount",
    ["abc", "", "1,5", "NaN", "Infinity", "-Infinity", "1_000", " 1 ", "1 ", "1\n", "0x10"],
)
def test_unparseable_amount_is_invalid(amount):
    """
    Amounts que no son un decimal finito se rechazan.
    """
    result = validate_trade_request(create_request(amount=amount))

    assert not result.ok
    assert "amount must be a decimal number" in result.errors[0]


# ==================== TESTS DE FEE ====================


def test_fee_and_fee_asset_together_is_valid():
    result = validate_trade_request(create_request(fee="0.01", fee_asset="USDT"))

    assert result.ok


def test_zero_fee_is_valid():
    result = validate_trade_request(create_request(fee="0", fee_asset="BNB"))

    assert result.ok


def test_fee_without_fee_asset_is_invalid():
    result = validate_trade_request(create_request(fee="0.01"))

    assert not result.ok
    assert result.errors == ["fee and feeAsset must be provided together"]


def test_fee_asset_without_fee_is_invalid():
    result = validate_trade_request(create_request(fee_asset="USDT"))

    assert not result.ok
    assert result.errors == ["fee and feeAsset must be provided together"]


def test_negative_fee_is_invalid():
    result = validate_trade_request(create_request(fee="-0.01", fee_asset="USDT"))

    assert not result.ok
    assert "fee must not be negative" in result.errors[0]


def test_unparseable_fee_is_invalid():
    result = validate_trade_request(create_request(fee="cheap", fee_asset="USDT"))

    assert not result.ok
    assert "fee must be a decimal number" in result.errors[0]


@pytest.mark.parametrize("fee", ["0_01", " 0.01", "0.01 "])
def test_fee_with_underscores_or_spaces_is_invalid(fee):
    result = validate_trade_request(create_request(fee=fee, fee_asset="USDT"))

    assert not result.ok
    assert "fee must be a decimal number" in result.errors[0]


# ==================== TESTS DE MÚLTIPLES ERRORES ====================


def test_all_errors_are_reported():
    """
    Se reportan todas las reglas rotas, no solo la primera.
    """
    result = validate_trade_request(create_request(amount="-1", fee="0.01"))

    assert not result.ok
    assert len(result.errors) == 2
