"""Consensus Aggregator: sentiment and confidence across agents."""

from collections import Counter
from typing import Iterable

from ..models import AgentOutcome, ConsensusResult
from ..models.results import Confidence, Sentiment

POSITIVE_WORDS = ("positive", "great", "recommend")
NEGATIVE_WORDS = ("negative", "avoid", "bad")


def classify_summary(summary: str) -> Sentiment:
    """Keyword containment; positive words take precedence over negative ones."""
    text = summary.lower()
    if any(word in text for word in POSITIVE_WORDS):
        return "positive"
    if any(word in text for word in NEGATIVE_WORDS):
        return "negative"
    return "neutral"


def confidence_for(responded: int) -> Confidence:
    if responded >= 3:
        return "high"
    if responded >= 2:
        return "medium"
    return "low"


def majority_sentiment(labels: Iterable[Sentiment]) -> Sentiment:
    """A label wins only with a strict majority over each other label."""
    counts = Counter(labels)
    positive, negative, neutral = counts["positive"], counts["negative"], counts["neutral"]
    if positive > negative and positive > neutral:
        return "positive"
    if negative > positive and negative > neutral:
        return "negative"
    return "neutral"


def aggregate(outcomes: list[AgentOutcome]) -> ConsensusResult:
    """Derive the consensus from every successful outcome."""
    successful = [o for o in outcomes if o.succeeded]

    if not successful:
        return ConsensusResult(
            overall_sentiment="unknown",
            confidence="low",
            responded_count=0,
            total_count=len(outcomes),
            summary_text="No agents were able to provide data",
        )

    overall = majority_sentiment(classify_summary(o.summary) for o in successful)
    return ConsensusResult(
        overall_sentiment=overall,
        confidence=confidence_for(len(successful)),
        responded_count=len(successful),
        total_count=len(outcomes),
        summary_text=(
            f"Based on {len(successful)} data sources, "
            f"the overall sentiment is {overall}."
        ),
    )
