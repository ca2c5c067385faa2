"""Location-selection agent: free-text travel wish to a concrete place."""

from ..llm import ILLMProvider, LLMError
from ..logging_config import get_logger
from ..models import LocationSuggestion
from .client import parse_json_object

logger = get_logger(__name__)

LOCATION_AGENT_PROMPT = """
You are a location-selection agent.

Your task:
1. Read what kind of place the user wants to visit.
2. Based on their answer, select ONE state from the world.
3. Respond with ONLY valid JSON.
4. DO NOT include explanations, markdown, or extra text.

JSON schema (strict):
{
  "country": "string",
  "state": "string",
  "lat": number,
  "long": number
}

Rules:
- Output must be valid JSON.
- No markdown.
- No comments.
- No extra keys.
"""


class LocationSuggestionError(Exception):
    """The backend did not produce a usable location."""


class LocationAgent:
    """Picks a place matching the user's description."""

    def __init__(self, llm_provider: ILLMProvider):
        self._llm = llm_provider

    async def suggest(self, user_input: str) -> LocationSuggestion:
        if not user_input or not user_input.strip():
            raise ValueError("Query required")

        try:
            raw = await self._llm.complete(
                messages=[{"role": "user", "content": user_input}],
                system=LOCATION_AGENT_PROMPT,
                max_tokens=200,
                temperature=0.3,
            )
            data = parse_json_object(raw)
            suggestion = LocationSuggestion(
                country=str(data["country"]),
                state=str(data["state"]),
                lat=float(data["lat"]),
                long=float(data["long"]),
            )
        except (LLMError, ValueError, KeyError, TypeError) as e:
            logger.warning("Location agent failed: %s", e)
            raise LocationSuggestionError(str(e)) from e

        logger.info("Location agent picked %s, %s", suggestion.state, suggestion.country)
        return suggestion
