"""Consumption trends and repurchase suggestions for Pantry Tracker."""

import logging
import math
from datetime import datetime, timedelta

from .config import SuggestionConfig, TrendsConfig
from .models import (
    Confidence,
    ConsumptionTrend,
    EventType,
    InventoryItem,
    ItemEvent,
    Priority,
    ShoppingSuggestion,
    StorageCategory,
    SuggestionDecision,
    to_local_naive,
)

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

REASON_LAST_ITEM = "last item, low usage level"
REASON_NO_HISTORY = "no consumption history"
REASON_REGULAR_PURCHASE = "regularly purchased item running low"
REASON_SUFFICIENT_STOCK = "sufficient stock"

_CONSUMPTION_EVENTS = {EventType.QUANTITY_DECREMENT, EventType.DELETED}
_PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


class ConsumptionAnalytics:
    """Derives consumption trends and repurchase suggestions from an event log.

    The event list is treated as a read-only snapshot; every call recomputes
    its result from it.
    """

    def __init__(
        self,
        events: list[ItemEvent] | None = None,
        trends: TrendsConfig | None = None,
        suggestions: SuggestionConfig | None = None,
    ):
        self.events = list(events or [])
        self.trends = trends or TrendsConfig()
        self.suggestions = suggestions or SuggestionConfig()

    def analyze_consumption(
        self,
        barcode: str,
        category: StorageCategory,
        lookback_days: int | None = None,
        current_quantity: int = 0,
        now: datetime | None = None,
    ) -> ConsumptionTrend | None:
        """Estimate consumption for one product identity.

        Args:
            barcode: Product barcode
            category: Storage category of the product
            lookback_days: Size of the analysis window in days
            current_quantity: Units currently in stock, for run-out prediction
            now: Reference time (defaults to the current time)

        Returns:
            ConsumptionTrend, or None when no events fall in the window
        """
        now = self._resolve_now(now)
        days = self.trends.lookback_days if lookback_days is None else lookback_days
        days = max(1, days)
        category = StorageCategory(category)

        try:
            since = now - timedelta(days=days)
        except OverflowError:
            since = datetime.min
        events = self._events_for(barcode, category, since=since)
        if not events:
            return None

        purchases = [e for e in events if e.event_type == EventType.ADDED]
        last_purchase = purchases[0].timestamp if purchases else None

        consumed = [e for e in events if e.event_type in _CONSUMPTION_EVENTS]
        total_consumed = sum(e.amount_consumed for e in consumed)
        consumption_rate = total_consumed / days

        predicted_run_out = None
        if consumption_rate > 0 and current_quantity > 0:
            try:
                predicted_run_out = now + timedelta(days=current_quantity / consumption_rate)
            except OverflowError:
                # Beyond datetime.max: no run-out in range
                predicted_run_out = None

        return ConsumptionTrend(
            barcode=barcode,
            category=category,
            name=events[0].name,
            consumption_rate=consumption_rate,
            purchase_frequency=self._purchase_frequency(purchases),
            total_consumed=total_consumed,
            last_purchase=last_purchase,
            predicted_run_out=predicted_run_out,
            confidence=self._confidence(total_consumed),
            event_count=len(events),
        )

    def should_suggest_purchase(
        self,
        barcode: str,
        category: StorageCategory,
        current_quantity: int,
        usage_level: int = 100,
        days_to_run_out: float | None = None,
        now: datetime | None = None,
    ) -> SuggestionDecision:
        """Decide whether an item should be put on the shopping list.

        Rules are tried in order and the first one that applies wins:
        last unit nearly used up, no history, predicted run-out within the
        threshold, regularly purchased item running low, otherwise enough
        stock.
        """
        now = self._resolve_now(now)
        category = StorageCategory(category)
        cfg = self.suggestions
        threshold = cfg.days_to_run_out if days_to_run_out is None else days_to_run_out
        low_usage = usage_level < cfg.low_usage_level

        if current_quantity == 1 and low_usage:
            return SuggestionDecision(
                should=True, reason=REASON_LAST_ITEM, priority=Priority.MEDIUM
            )

        trend = self.analyze_consumption(
            barcode, category, current_quantity=current_quantity, now=now
        )
        if trend is None:
            return SuggestionDecision(
                should=False, reason=REASON_NO_HISTORY, priority=Priority.LOW
            )

        if trend.predicted_run_out is not None and low_usage:
            days_left = (trend.predicted_run_out - now).total_seconds() / SECONDS_PER_DAY
            if 0 < days_left <= threshold:
                priority = Priority.HIGH if days_left <= cfg.urgent_days else Priority.MEDIUM
                logger.debug("%s:%s runs out in %.1f days", barcode, category.value, days_left)
                return SuggestionDecision(
                    should=True,
                    reason=(
                        "low usage level, expected to run out in "
                        f"{math.ceil(days_left)} days"
                    ),
                    priority=priority,
                )

        if trend.purchase_frequency > 0 and trend.confidence == Confidence.HIGH:
            avg_per_purchase = trend.total_consumed / max(1, trend.purchase_frequency)
            if current_quantity < avg_per_purchase * cfg.regular_stock_ratio:
                return SuggestionDecision(
                    should=True, reason=REASON_REGULAR_PURCHASE, priority=Priority.MEDIUM
                )

        return SuggestionDecision(
            should=False, reason=REASON_SUFFICIENT_STOCK, priority=Priority.LOW
        )

    def auto_suggestions(
        self,
        inventory: list[InventoryItem],
        existing_keys: set[str] | None = None,
        now: datetime | None = None,
    ) -> list[ShoppingSuggestion]:
        """Build shopping-list suggestions for the whole inventory.

        Args:
            inventory: Inventory snapshot; portions are skipped
            existing_keys: "barcode:category" keys already on the open list
            now: Reference time (defaults to the current time)

        Returns:
            Suggestions, highest priority first
        """
        now = self._resolve_now(now)
        skip = set(existing_keys or ())
        suggestions: list[ShoppingSuggestion] = []

        for item in inventory:
            if item.is_portion or item.identity_key in skip:
                continue
            decision = self.should_suggest_purchase(
                item.barcode,
                item.category,
                current_quantity=item.quantity,
                usage_level=item.usage_level,
                now=now,
            )
            if not decision.should:
                continue
            skip.add(item.identity_key)
            suggestions.append(
                ShoppingSuggestion(
                    barcode=item.barcode,
                    name=item.name,
                    category=item.category,
                    priority=decision.priority,
                    reason=decision.reason,
                )
            )

        logger.debug("Generated %d shopping suggestions", len(suggestions))
        return sorted(suggestions, key=lambda s: _PRIORITY_ORDER[s.priority])

    def _events_for(
        self, barcode: str, category: StorageCategory, since: datetime
    ) -> list[ItemEvent]:
        """Events for a product identity at or after `since`, newest first."""
        selected = [
            e
            for e in self.events
            if e.barcode == barcode and e.category == category and e.timestamp >= since
        ]
        return sorted(selected, key=lambda e: e.timestamp, reverse=True)

    @staticmethod
    def _purchase_frequency(purchases: list[ItemEvent]) -> float:
        """Average days between consecutive purchases (newest first input)."""
        if len(purchases) < 2:
            return 0.0
        intervals = [
            (purchases[i].timestamp - purchases[i + 1].timestamp).total_seconds()
            / SECONDS_PER_DAY
            for i in range(len(purchases) - 1)
        ]
        return sum(intervals) / len(intervals)

    def _confidence(self, total_consumed: int) -> Confidence:
        if total_consumed >= self.trends.high_confidence_consumed:
            return Confidence.HIGH
        elif total_consumed >= self.trends.medium_confidence_consumed:
            return Confidence.MEDIUM
        return Confidence.LOW

    @staticmethod
    def _resolve_now(now: datetime | None) -> datetime:
        return datetime.now() if now is None else to_local_naive(now)
