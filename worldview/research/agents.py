"""Research perspectives and their prompt builders."""

from ..models import AgentTaskDescriptor


class UnknownAgentError(KeyError):
    """No registered agent carries the requested name."""


def _place(location: str, region: str | None) -> str:
    return f"{location}, {region}" if region else location


def build_local_prompt(location: str, region: str | None) -> str:
    return f"""
You are a knowledgeable local guide for {_place(location, region)}.
Provide insider recommendations that tourists typically don't know about.

TASK:
Provide 3-4 specific local recommendations. Focus on:
- Hidden gems, local favorites, neighborhood spots
- Authentic experiences that locals enjoy
- Be specific with names when possible

RETURN ONLY valid JSON (no markdown, no code blocks):
{{
  "agent": "local_insights",
  "summary": "One sentence about what makes this place special",
  "spots": [
    {{
      "name": "Specific place name",
      "category": "Food/Bar/Park/Culture/Nature",
      "why_cool": "Why locals love it",
      "avoid": "Tourist trap to skip instead"
    }}
  ]
}}
"""


def build_reddit_prompt(location: str, region: str | None) -> str:
    return f"""
Analyze the general sentiment and discussion about {_place(location, region)} on Reddit.

TASK:
Simulate what Reddit users would say about this location. Consider:
- What do locals complain about or praise?
- What are common topics in local subreddits?
- What insider tips do people share?

RETURN ONLY valid JSON (no markdown, no code blocks):
{{
  "agent": "reddit_sentiment",
  "summary": "Overall Reddit sentiment about this place",
  "mentions": [
    {{
      "topic": "Common discussion topic",
      "sentiment": "positive/negative/neutral",
      "example_comment": "Example of what a Redditor might say",
      "upvotes": 123
    }}
  ],
  "popular_subreddits": ["r/subreddit1", "r/subreddit2"],
  "vibe_check": "Brief description of the online community vibe"
}}
"""


def build_tripadvisor_prompt(location: str, region: str | None) -> str:
    return f"""
Analyze tourist reviews and ratings for {_place(location, region)} on TripAdvisor.

TASK:
Provide insights based on typical TripAdvisor reviews. Consider:
- Overall rating and common praises/complaints
- Most reviewed attractions
- Tips from recent travelers
- Best times to visit based on reviews

RETURN ONLY valid JSON (no markdown, no code blocks):
{{
  "agent": "tripadvisor_sentiment",
  "summary": "Overall TripAdvisor rating and sentiment",
  "rating": {{"overall": 4.2, "food": 4.0, "sights": 4.5, "value": 3.8}},
  "top_review_themes": [
    {{
      "theme": "Common review theme",
      "frequency": "very common/common/occasional",
      "sentiment": "positive/negative/mixed"
    }}
  ],
  "traveler_tips": ["Tip 1", "Tip 2", "Tip 3"],
  "best_season": "Recommended season to visit"
}}
"""


def build_news_prompt(location: str, region: str | None) -> str:
    return f"""
Analyze recent news and search engine trends about {_place(location, region)}.

TASK:
Provide insights from news and search trends. Consider:
- Recent developments or events
- Popular search queries
- How the location is portrayed in media
- Current events affecting tourism

RETURN ONLY valid JSON (no markdown, no code blocks):
{{
  "agent": "news_sentiment",
  "summary": "Current news and search trends about this place",
  "trending_topics": [
    {{
      "topic": "Current news topic",
      "sentiment": "positive/negative/neutral",
      "impact": "high/medium/low"
    }}
  ],
  "search_interest": {{
    "level": "high/medium/low",
    "common_searches": ["search query 1", "search query 2"]
  }},
  "media_coverage": "Brief description of media portrayal",
  "current_events": ["Event 1", "Event 2"]
}}
"""


LOCAL_INSIGHTS = AgentTaskDescriptor(
    name="local_insights",
    build_prompt=build_local_prompt,
    category="local",
    reliability="expert",
    contribution_label="local expertise",
    source_type="Local Expert Knowledge",
    credibility="Based on local expertise and hidden gems",
)

REDDIT_SENTIMENT = AgentTaskDescriptor(
    name="reddit_sentiment",
    build_prompt=build_reddit_prompt,
    category="social",
    reliability="community",
    contribution_label="Reddit community",
    source_type="Reddit Community Discussions",
    credibility="Based on real user experiences and discussions",
)

TRIPADVISOR_SENTIMENT = AgentTaskDescriptor(
    name="tripadvisor_sentiment",
    build_prompt=build_tripadvisor_prompt,
    category="reviews",
    reliability="community",
    contribution_label="TripAdvisor reviews",
    source_type="TripAdvisor Reviews & Ratings",
    credibility="Based on verified traveler reviews",
)

NEWS_SENTIMENT = AgentTaskDescriptor(
    name="news_sentiment",
    build_prompt=build_news_prompt,
    category="media",
    reliability="community",
    contribution_label="news & media",
    source_type="News & Media Analysis",
    credibility="Based on recent news and search trends",
)

# Declaration order is the outcome order.
DEFAULT_AGENTS: tuple[AgentTaskDescriptor, ...] = (
    LOCAL_INSIGHTS,
    REDDIT_SENTIMENT,
    TRIPADVISOR_SENTIMENT,
    NEWS_SENTIMENT,
)


def agent_names(agents: tuple[AgentTaskDescriptor, ...] = DEFAULT_AGENTS) -> list[str]:
    return [agent.name for agent in agents]


def get_agent(
    name: str, agents: tuple[AgentTaskDescriptor, ...] = DEFAULT_AGENTS
) -> AgentTaskDescriptor:
    """Look up a descriptor by name."""
    for agent in agents:
        if agent.name == name:
            return agent
    raise UnknownAgentError(name)
