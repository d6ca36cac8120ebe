"""LLM-backed meal parsing and nutrition advice."""

import json
import logging
from dataclasses import dataclass
from typing import Protocol

from wellness_tracker.domain.llm import LLMParsedMeal, MealValidation

_logger = logging.getLogger(__name__)

PARSER_SYSTEM_PROMPT = (
    "You are a nutrition expert and food database specialist. Parse meal "
    "descriptions into structured nutrition data with high accuracy. Use your "
    "knowledge of food nutrition to provide the most accurate values possible."
)

_PARSE_PROMPT = """
Please parse the following meal description and provide accurate nutrition information.

Meal Description: "{description}"

Instructions:
1. Break down the meal into individual food items
2. For each food item, provide:
   - Name (standard food name)
   - Quantity (numeric value)
   - Unit (grams, cups, tbsp, tsp, count, etc.)
   - Preparation method if specified (cooked, raw, fried, etc.)
   - Weight in grams (calculated based on quantity and unit)
   - Calories per 100g
   - Protein per 100g
   - Carbs per 100g
   - Fats per 100g
   - Fiber per 100g (if available)
   - Sugar per 100g (if available)
   - Sodium per 100g (if available)

3. Calculate total nutrition for the meal
4. Provide confidence level (0-100) for the accuracy

Use this JSON format:
{{
  "foods": [
    {{
      "name": "food_name",
      "quantity": 1.0,
      "unit": "cup",
      "preparation": "cooked",
      "weight": 158,
      "calories": 130,
      "protein": 2.7,
      "carbs": 28,
      "fats": 0.3,
      "fiber": 0.4,
      "sugar": 0.1,
      "sodium": 1
    }}
  ],
  "totalCalories": 500,
  "totalProtein": 25.5,
  "totalCarbs": 45.2,
  "totalFats": 12.8,
  "totalFiber": 8.5,
  "totalSugar": 15.3,
  "totalSodium": 450,
  "totalWeight": 350,
  "confidence": 95
}}

Be as accurate as possible with nutrition values. Use standard USDA nutrition database values when available.
"""

_VALIDATE_PROMPT = """
Validate this meal description for common issues:

"{description}"

Check for:
1. Missing quantities or units
2. Unclear food names
3. Ambiguous measurements
4. Missing preparation methods that affect nutrition

Return JSON format:
{{
  "isValid": true/false,
  "issues": ["list of issues found"],
  "suggestions": ["list of improvement suggestions"]
}}
"""

_SUGGESTIONS_PROMPT = """
Analyze this meal and provide personalized suggestions for optimization:

Meal: "{description}"
{target}

Please provide:
1. Brief nutrition analysis of the meal
2. Suggestions for improvement (if needed)
3. Alternative food options that could enhance nutrition
4. Portion size recommendations
5. Any health benefits or concerns to consider

Keep the response friendly, concise, and practical.
"""

_QUESTION_PROMPT = """Answer this specific question about the meal: "{question}"

Meal: "{description}"

Please provide a helpful, conversational response."""

_ANALYSIS_PROMPT = """Provide a friendly analysis of this meal:

Meal: "{description}"

Please give a conversational overview including:
- What you think about this meal
- Any interesting nutrition facts
- Suggestions for making it even better
- Any fun facts about the ingredients

Keep it friendly and engaging!"""

_RECOMMENDATIONS_PROMPT = """Suggest some healthy meal ideas based on these preferences:

{preferences}
{restrictions}

Please provide:
1. 3-5 meal suggestions
2. Brief explanation of why each meal is good
3. Any tips for preparation

Keep it friendly and helpful!"""


class LlmResponseError(RuntimeError):
    """Raised when an LLM response carries no usable JSON payload."""


class ChatClient(Protocol):
    """Interface for chat-completion LLM calls."""

    async def complete(
        self,
        *,
        model: str,
        messages: list[dict[str, str]],
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the assistant message text for a conversation."""


def extract_json_object(content: str) -> dict[str, object]:
    """Return the JSON object spanning the first '{' to the last '}'."""
    start = content.find("{")
    end = content.rfind("}")
    if start == -1 or end <= start:
        raise LlmResponseError("No JSON found in LLM response")
    try:
        data = json.loads(content[start : end + 1])
    except json.JSONDecodeError as exc:
        raise LlmResponseError("Failed to parse LLM response") from exc
    if not isinstance(data, dict):
        raise LlmResponseError("LLM response JSON is not an object")
    return data


@dataclass
class LlmMealService:
    """Prompts an LLM for meal parsing, validation and advice."""

    client: ChatClient | None
    model: str = "gpt-4"

    @property
    def is_available(self) -> bool:
        """Return True when an LLM client is configured."""
        return self.client is not None

    async def parse_meal(self, description: str) -> LLMParsedMeal:
        """Parse a meal description into foods with per-100 g macros.

        Raises on any request or response failure; callers decide how to
        fall back. Numeric fields that are missing or unreadable become 0.
        """
        content = await self._chat(
            system=PARSER_SYSTEM_PROMPT,
            prompt=_PARSE_PROMPT.format(description=description),
            temperature=0.1,
            max_tokens=2000,
        )
        data = extract_json_object(content)
        if not isinstance(data.get("foods"), list):
            raise LlmResponseError("LLM response is missing the foods list")
        return LLMParsedMeal.model_validate(data)

    async def validate_meal_description(self, description: str) -> MealValidation:
        """Ask the LLM to flag ambiguous quantities or food names."""
        if self.client is None:
            return MealValidation(
                is_valid=True,
                suggestions=["LLM validation not available without API key"],
            )
        try:
            content = await self._chat(
                system=(
                    "You are a nutrition expert validating meal descriptions. "
                    "Be thorough but friendly in your analysis."
                ),
                prompt=_VALIDATE_PROMPT.format(description=description),
                temperature=0.1,
                max_tokens=500,
            )
        except Exception as exc:
            _logger.warning("Meal validation request failed: %s", exc)
            return MealValidation(
                is_valid=True, suggestions=["Validation service unavailable"]
            )
        try:
            return MealValidation.model_validate(extract_json_object(content))
        except (LlmResponseError, ValueError):
            return MealValidation(
                is_valid=True, suggestions=["Unable to validate description"]
            )

    async def get_nutrition_suggestions(
        self, description: str, target_calories: int | None = None
    ) -> str:
        """Return free-text advice for improving a meal."""
        if self.client is None:
            return "LLM API key not configured for nutrition suggestions."
        target = f"Target Calories: {target_calories}" if target_calories else ""
        try:
            return await self._chat(
                system=(
                    "You are a helpful nutrition expert providing practical meal "
                    "optimization advice. Be friendly and conversational while "
                    "giving accurate, actionable advice."
                ),
                prompt=_SUGGESTIONS_PROMPT.format(
                    description=description, target=target
                ),
                temperature=0.7,
                max_tokens=500,
            )
        except Exception as exc:
            _logger.warning("Nutrition suggestions request failed: %s", exc)
            return "Unable to get nutrition suggestions at this time."

    async def get_conversational_analysis(
        self, description: str, question: str | None = None
    ) -> str:
        """Return a conversational take on a meal, or answer a question about it."""
        if self.client is None:
            return "LLM API key not configured for conversational analysis."
        if question:
            prompt = _QUESTION_PROMPT.format(question=question, description=description)
        else:
            prompt = _ANALYSIS_PROMPT.format(description=description)
        try:
            return await self._chat(
                system=(
                    "You are a friendly and knowledgeable nutrition assistant. Be "
                    "conversational, helpful, and engaging in your responses."
                ),
                prompt=prompt,
                temperature=0.8,
                max_tokens=400,
            )
        except Exception as exc:
            _logger.warning("Conversational analysis request failed: %s", exc)
            return "Unable to get meal analysis at this time."

    async def get_meal_recommendations(
        self, preferences: str | None = None, restrictions: str | None = None
    ) -> str:
        """Return meal ideas for the given preferences and restrictions."""
        if self.client is None:
            return "LLM API key not configured for meal recommendations."
        prompt = _RECOMMENDATIONS_PROMPT.format(
            preferences=(
                f"Preferences: {preferences}"
                if preferences
                else "No specific preferences"
            ),
            restrictions=(
                f"Dietary Restrictions: {restrictions}"
                if restrictions
                else "No dietary restrictions"
            ),
        )
        try:
            return await self._chat(
                system=(
                    "You are a helpful meal planning assistant. Provide creative "
                    "and healthy meal suggestions."
                ),
                prompt=prompt,
                temperature=0.9,
                max_tokens=600,
            )
        except Exception as exc:
            _logger.warning("Meal recommendations request failed: %s", exc)
            return "Unable to get meal recommendations at this time."

    async def _chat(
        self, *, system: str, prompt: str, temperature: float, max_tokens: int
    ) -> str:
        if self.client is None:
            raise LlmResponseError("LLM API key not configured")
        return await self.client.complete(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )
