"""
API 점검

Public 메서드와 읽기 전용 Private 메서드를 한 번씩 호출해 결과를 수집.
실패는 예외로 중단하지 않고 결과 목록에 기록한다.
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

import httpx

from adapters.independent_reserve.base_client import IndependentReserveApiError
from adapters.independent_reserve.private_client import PrivateRestClient
from adapters.independent_reserve.public_client import PublicRestClient
from core.constants import Defaults

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckResult:
    """메서드 1개 점검 결과"""

    name: str
    ok: bool
    error: str | None = None


async def _run_checks(
    calls: list[tuple[str, Callable[[], Awaitable[Any]]]],
) -> list[CheckResult]:
    results: list[CheckResult] = []
    for name, call in calls:
        try:
            await call()
        except (IndependentReserveApiError, httpx.HTTPError) as e:
            logger.warning(f"{name} 실패", extra={"error": str(e)})
            results.append(CheckResult(name=name, ok=False, error=str(e)))
            continue
        logger.info(f"{name} 성공")
        results.append(CheckResult(name=name, ok=True))
    return results


async def check_public_api(
    client: PublicRestClient,
    primary: str = Defaults.PRIMARY_CURRENCY,
    secondary: str = Defaults.SECONDARY_CURRENCY,
) -> list[CheckResult]:
    """Public 메서드 전체 호출"""
    return await _run_checks([
        ("GetValidPrimaryCurrencyCodes", client.get_valid_primary_currency_codes),
        ("GetValidSecondaryCurrencyCodes", client.get_valid_secondary_currency_codes),
        ("GetValidLimitOrderTypes", client.get_valid_limit_order_types),
        ("GetValidMarketOrderTypes", client.get_valid_market_order_types),
        ("GetValidOrderTypes", client.get_valid_order_types),
        ("GetValidTransactionTypes", client.get_valid_transaction_types),
        ("GetMarketSummary", lambda: client.get_market_summary(primary, secondary)),
        ("GetOrderBook", lambda: client.get_order_book(primary, secondary)),
        ("GetAllOrders", lambda: client.get_all_orders(primary, secondary)),
        ("GetTradeHistorySummary", lambda: client.get_trade_history_summary(primary, secondary, 1)),
        ("GetRecentTrades", lambda: client.get_recent_trades(primary, secondary, 10)),
        ("GetFxRates", client.get_fx_rates),
    ])


async def check_private_api(
    client: PrivateRestClient,
    primary: str = Defaults.PRIMARY_CURRENCY,
    secondary: str = Defaults.SECONDARY_CURRENCY,
) -> list[CheckResult]:
    """읽기 전용 Private 메서드 호출

    주문/출금 ID가 필요한 GetOrderDetails, GetDigitalCurrencyWithdrawal은 제외.
    """
    page_index = 1
    return await _run_checks([
        ("GetOpenOrders", lambda: client.get_open_orders(primary, secondary, page_index)),
        ("GetClosedOrders", lambda: client.get_closed_orders(primary, secondary, page_index)),
        ("GetClosedFilledOrders", lambda: client.get_closed_filled_orders(primary, secondary, page_index)),
        ("GetAccounts", client.get_accounts),
        ("GetDigitalCurrencyDepositAddress", lambda: client.get_digital_currency_deposit_address(primary)),
        (
            "GetDigitalCurrencyDepositAddresses",
            lambda: client.get_digital_currency_deposit_addresses(primary, page_index),
        ),
        ("GetTrades", lambda: client.get_trades(page_index)),
        ("GetBrokerageFees", client.get_brokerage_fees),
    ])
