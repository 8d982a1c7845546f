"""Maximum profit from buying and selling a stock, once or twice."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TradeSummary:
    """Result of a single buy followed by a single sell."""

    bought_at: float
    sold_at: float
    profit: float

    def __str__(self) -> str:
        return (
            "📈 Trade Summary\n------------------\n"
            f"Bought at: {self.bought_at:.2f}\n"
            f"Sold at: {self.sold_at:.2f}\n"
            f"Profit: {self.profit:.2f}\n"
        )


@dataclass(frozen=True)
class TwoTradeSummary:
    """Prices and total profit of at most two non-overlapping trades."""

    first_buy_price: int = 0
    first_sell_price: int = 0
    second_buy_price: int = 0
    second_sell_price: int = 0
    total_profit: int = 0


def buy_and_sell_once(prices: Sequence[float]) -> TradeSummary:
    """Find the best single buy-then-sell trade over ``prices``.

    When no trade makes money, buy and sell prices and profit are all zero.
    Raises ValueError for an empty sequence.
    """
    if not prices:
        raise ValueError("please add an array of prices")

    min_price_so_far = prices[0]
    max_profit = 0.0
    buy_price = 0.0
    sell_price = 0.0

    for price in prices:
        potential_profit = price - min_price_so_far
        if potential_profit > max_profit:
            max_profit = potential_profit
            buy_price = min_price_so_far
            sell_price = price
        min_price_so_far = min(min_price_so_far, price)

    return TradeSummary(bought_at=buy_price, sold_at=sell_price, profit=max_profit)


def max_profit_two_transactions(prices: Sequence[int]) -> TwoTradeSummary:
    """Compute the maximum profit obtainable with at most two trades."""
    min_price = math.inf
    profit_after_first_sell = 0
    profit_left_after_second_buy = -math.inf
    profit_after_second_sell = 0

    first_buy = first_sell = second_buy = second_sell = 0

    for price in prices:
        if price < min_price:
            min_price = price
            first_buy = price

        if price - min_price > profit_after_first_sell:
            profit_after_first_sell = price - min_price
            first_sell = price

        if profit_after_first_sell - price > profit_left_after_second_buy:
            profit_left_after_second_buy = profit_after_first_sell - price
            second_buy = price

        if price + profit_left_after_second_buy > profit_after_second_sell:
            profit_after_second_sell = price + profit_left_after_second_buy
            second_sell = price

    return TwoTradeSummary(
        first_buy_price=first_buy,
        first_sell_price=first_sell,
        second_buy_price=second_buy,
        second_sell_price=second_sell,
        total_profit=profit_after_second_sell,
    )