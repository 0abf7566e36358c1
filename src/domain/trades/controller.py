import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status

from src.domain.trades.dtos.trade_dto import TradeCreateDTO, TradeDTO
from src.domain.trades.trade_ledger import TradeLedger

logger = logging.getLogger(__name__)


router = APIRouter(prefix="/trades", tags=["trades"])


def get_trade_ledger(request: Request) -> TradeLedger:
    return request.app.state.trade_ledger


@router.get(
    "",
    summary="List all trades in creation order",
    response_model=List[TradeDTO],
    response_model_exclude_none=True,
)
async def list_trades(ledger: TradeLedger = Depends(get_trade_ledger)) -> List[TradeDTO]:
    return ledger.list()


@router.get(
    "/{trade_id}",
    summary="Get a trade by id",
    response_model=TradeDTO,
    response_model_exclude_none=True,
)
async def get_trade(trade_id: str, ledger: TradeLedger = Depends(get_trade_ledger)) -> TradeDTO:
    # TradeNotFoundError is rendered by the application error handlers
    return ledger.get_by_id(trade_id)


@router.post(
    "",
    summary="Record a trade execution",
    response_model=TradeDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_trade(payload: TradeCreateDTO,
                       ledger: TradeLedger = Depends(get_trade_ledger),
                       ) -> TradeDTO:
    trade = ledger.create(payload)
    logger.info(
        f"Trade recorded: id={trade.id} {trade.exchange.value} "
        f"{trade.side.value} {trade.amount} {trade.base_asset}/{trade.quote_asset}"
    )
    return trade
