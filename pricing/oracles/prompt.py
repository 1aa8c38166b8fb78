"""Prompt construction and response parsing for language-model oracles."""

import json
import re

from pricing.domain import Confidence, DemandSnapshot, Money, OracleScore

SYSTEM_PROMPT = (
    "You are a pricing optimization AI. Always return valid JSON only, no additional text."
)

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")


def _history_lines(snapshot: DemandSnapshot) -> str:
    if not snapshot.pricing_history:
        return "- No previous price changes"
    return "\n".join(
        f"- ${entry.old_price} -> ${entry.new_price}: {entry.reason}"
        for entry in snapshot.pricing_history
    )


def build_prompt(snapshot: DemandSnapshot) -> str:
    """Render the demand snapshot and its recent history as the user prompt."""
    return f"""You are a dynamic pricing optimization AI for event tickets.

CURRENT SITUATION:
- Current Price: ${snapshot.current_price}
- Total Seats: {snapshot.total_seats}
- Available Seats: {snapshot.available_seats}
- Occupancy Rate: {snapshot.occupancy_rate:.1f}%
- Booking Velocity: {snapshot.booking_velocity:.2f} bookings/day
- Recent Bookings (24h): {snapshot.recent_bookings}
- Days Until Event: {snapshot.days_remaining:.1f}

PRICING HISTORY:
{_history_lines(snapshot)}

TASK:
Analyze the demand signals and suggest an optimal ticket price.
Consider:
1. High occupancy + high velocity = increase price
2. Low occupancy + event approaching = decrease price
3. Steady demand = maintain price
4. Last-minute surge = increase price

Return ONLY valid JSON in this exact format:
{{
  "suggestedPrice": 150.00,
  "confidence": 0.85,
  "reasoning": "High booking velocity and 75% occupancy suggest strong demand. Recommend 15% price increase to maximize revenue."
}}"""


def parse_score(content: str) -> OracleScore:
    """Parse a model reply into an OracleScore.

    Raises:
        ValueError: If the reply is not a JSON object with a positive
            suggestedPrice, a confidence in [0, 1] and a string reasoning.
    """
    payload = json.loads(_FENCE.sub("", content.strip()))
    if not isinstance(payload, dict):
        raise ValueError("Oracle reply is not a JSON object")

    price = payload.get("suggestedPrice")
    confidence = payload.get("confidence")
    reasoning = payload.get("reasoning")

    # bool is an int subclass
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ValueError("suggestedPrice must be a number")
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        raise ValueError("confidence must be a number")
    if not isinstance(reasoning, str):
        raise ValueError("reasoning must be a string")

    return OracleScore(
        suggested_price=Money.of(price),
        confidence=Confidence(float(confidence)),
        reasoning=reasoning,
    )
