"""Rule engine turning catalog entries into scored recommendations."""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from smart_packing.core.conditions import evaluate_condition
from smart_packing.core.quantity import calculate_quantity
from smart_packing.core.schemas import (
    CatalogEntry,
    ItemPriority,
    Recommendation,
    RecommendationReason,
    TripContext,
)
from smart_packing.core.thresholds import SCORING

logger = logging.getLogger(__name__)


class RuleEngine:
    """Evaluates every catalog entry against a trip context.

    Scoring works in three steps:
    1. The entry's priority-tier weight seeds the score.
    2. Each matched condition adds its type's base score multiplied by the
       condition's own weight.
    3. Essential and critical entries are floored at ``must_have_floor``; the
       total is clamped to [0, 1] and becomes the confidence.

    An entry without any matched condition is only a candidate when it carries
    the critical tier. Non-essential candidates under ``min_confidence`` are
    rejected.
    """

    def generate_recommendations(
        self,
        entries: Iterable[CatalogEntry],
        context: TripContext,
    ) -> List[Recommendation]:
        """Score ``entries`` and return them by priority weight, then confidence."""
        recommendations: List[Recommendation] = []
        for entry in entries:
            recommendation = self.evaluate_entry(entry, context)
            if recommendation is not None:
                recommendations.append(recommendation)

        recommendations.sort(key=lambda rec: (-rec.priority.weight, -rec.confidence))
        logger.debug("Rule engine produced %s recommendations", len(recommendations))
        return recommendations

    def evaluate_entry(self, entry: CatalogEntry, context: TripContext) -> Optional[Recommendation]:
        total_score = entry.priority.weight
        reasons: List[RecommendationReason] = []
        matched_any = False

        for condition in entry.conditions:
            outcome = evaluate_condition(condition, context)
            if not outcome.matches:
                continue
            matched_any = True
            total_score += outcome.score * condition.weight
            reasons.append(outcome.reason(condition.weight))

        is_critical = entry.priority is ItemPriority.CRITICAL
        if not matched_any and not is_critical:
            return None

        if entry.is_must_have:
            total_score = max(total_score, SCORING.must_have_floor)

        confidence = min(1.0, max(0.0, total_score))
        if confidence < SCORING.min_confidence and not entry.is_must_have:
            logger.debug("Rejected %s with confidence %.2f", entry.id, confidence)
            return None

        return Recommendation(
            entry=entry,
            recommended_quantity=calculate_quantity(entry, context),
            confidence=confidence,
            reasons=tuple(reasons),
            is_auto_selected=confidence > SCORING.auto_select_above or is_critical,
        )
