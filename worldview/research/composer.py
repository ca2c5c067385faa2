"""Result Composer: fold outcomes and consensus into one AggregateResult."""

from datetime import datetime, timezone

from ..models import (
    AgentOutcome,
    AgentTaskDescriptor,
    AggregateResult,
    ConsensusResult,
    PlaceQuery,
    SourceInfo,
)
from .agents import DEFAULT_AGENTS, LOCAL_INSIGHTS


def build_sources(
    outcomes: list[AgentOutcome], agents: dict[str, AgentTaskDescriptor]
) -> tuple[SourceInfo, ...]:
    sources = []
    for outcome in outcomes:
        if not outcome.succeeded:
            continue
        agent = agents[outcome.agent_name]
        sources.append(
            SourceInfo(
                name=agent.display_name,
                category=agent.category,
                reliability=agent.reliability,
            )
        )
    return tuple(sources)


def build_enhanced_summary(
    outcomes: list[AgentOutcome], agents: dict[str, AgentTaskDescriptor]
) -> str:
    successful = [o for o in outcomes if o.succeeded]
    labels = ", ".join(agents[o.agent_name].contribution_label for o in successful)
    return f"Analysis based on {len(successful)} sources: {labels}"


def compose(
    place: PlaceQuery,
    outcomes: list[AgentOutcome],
    consensus: ConsensusResult,
    elapsed_ms: float,
    agents: tuple[AgentTaskDescriptor, ...] = DEFAULT_AGENTS,
) -> AggregateResult:
    """Build the AggregateResult returned to (and cached for) callers."""
    by_name = {agent.name: agent for agent in agents}

    details = {}
    for outcome in outcomes:
        agent = by_name[outcome.agent_name]
        details[outcome.agent_name] = {
            **outcome.payload,
            "source_type": agent.source_type,
            "credibility": agent.credibility,
        }

    local = next(
        (
            o
            for o in outcomes
            if o.succeeded and o.agent_name == LOCAL_INSIGHTS.name
        ),
        None,
    )
    summary = (local.summary if local else "") or consensus.summary_text
    spots = local.payload.get("spots") if local else None

    return AggregateResult(
        place=place,
        outcomes=tuple(outcomes),
        consensus=consensus,
        sources=build_sources(outcomes, by_name),
        generated_at=datetime.now(timezone.utc),
        execution_time_ms=round(elapsed_ms),
        enhanced_summary=build_enhanced_summary(outcomes, by_name),
        summary=summary,
        spots=tuple(spots) if isinstance(spots, list) else (),
        details=details,
    )
