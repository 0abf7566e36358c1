import itertools
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from src.domain.trades.dtos.trade_dto import TradeCreateDTO, TradeDTO
from src.domain.trades.errors import InvalidTradeRequestError, TradeNotFoundError
from src.domain.trades.validation import validate_trade_request


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TradeLedger:
    """
    In-memory ledger of trade executions:
    - owns the only copy of the record collection
    - assigns ids from a per-instance counter ("1", "2", ...)
    - records are frozen TradeDTOs, returned as-is (they cannot be mutated)
    - every access to the collection goes through one lock
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or _utc_now
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._trades: List[TradeDTO] = []
        self._by_id: Dict[str, TradeDTO] = {}

    # ---------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------
    def list(self) -> List[TradeDTO]:
        """All trades in creation order. The returned list is a fresh copy."""
        with self._lock:
            return list(self._trades)

    def get_by_id(self, trade_id: str) -> TradeDTO:
        with self._lock:
            trade = self._by_id.get(trade_id)

        if trade is None:
            raise TradeNotFoundError(trade_id)
        return trade

    def count(self) -> int:
        with self._lock:
            return len(self._trades)

    # ---------------------------------------------------------------------
    # Commands
    # ---------------------------------------------------------------------
    def create(self, request: TradeCreateDTO) -> TradeDTO:
        """
        Lógica:
        1) Validar reglas de amount/fee (si falla, no se toca nada)
        2) Tomar el siguiente id y un timestamp no anterior al último
        3) Copiar los campos del request tal cual
        4) Agregar el registro e indexarlo por id
        """
        result = validate_trade_request(request)
        if not result.ok:
            raise InvalidTradeRequestError(result.errors)

        with self._lock:
            timestamp = self._clock()
            if self._trades and timestamp < self._trades[-1].timestamp:
                timestamp = self._trades[-1].timestamp

            trade = TradeDTO(
                id=str(next(self._ids)),
                exchange=request.exchange,
                base_asset=request.base_asset,
                quote_asset=request.quote_asset,
                side=request.side,
                amount=request.amount,
                timestamp=timestamp,
                fee=request.fee,
                fee_asset=request.fee_asset,
            )

            self._trades.append(trade)
            self._by_id[trade.id] = trade

        return trade
