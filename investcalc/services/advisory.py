"""
Advisory service using the Gemini REST API.

Falls back to a static response when no API key is configured or the
call fails for any reason. Never raises to the caller.
"""

import json
import logging
from dataclasses import asdict
from typing import List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from investcalc.calculations.types import CalculationResult, Mode, ProjectionInputs
from investcalc.config import get_settings

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """
You are a senior financial advisor. Analyze the investment calculation data and
provide a concise, actionable summary.
Focus on:
1. Wealth creation potential.
2. The impact of inflation.
3. Tax efficiency.
4. Risk factors associated with the selected investment type.
5. 2-3 specific, actionable tips to improve the outcome.

Keep the tone professional yet encouraging.
Format the output as a JSON object with keys: "summary", "recommendations"
(array of strings), "riskAssessment".
"""


class AdvisoryResult(BaseModel):
    """Free-text commentary on a projection."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: str
    recommendations: List[str] = Field(default_factory=list)
    risk_assessment: str


NOT_CONFIGURED_ADVICE = AdvisoryResult(
    summary="API key not configured. Add a Gemini API key to enable AI insights.",
    recommendations=["Configure API key", "Consult a financial advisor"],
    risk_assessment="Unknown",
)

UNAVAILABLE_ADVICE = AdvisoryResult(
    summary="Could not generate AI analysis at this time.",
    recommendations=["Check your internet connection", "Try again later"],
    risk_assessment="Unavailable",
)


def build_prompt(mode: Mode, inputs: ProjectionInputs, result: CalculationResult) -> str:
    """Describe the scenario and its headline figures for the model."""
    headline = {
        "invested": result.total_invested,
        "final": result.final_value,
        "profit": result.total_interest,
        "postTax": result.post_tax_value,
        "cagr": round(result.cagr, 2),
        "durationYears": result.duration_years,
    }
    if result.monthly_payment:
        headline["monthlyPayment"] = result.monthly_payment

    return (
        "Analyze this investment scenario:\n"
        f"Type: {Mode(mode).value}\n"
        f"Inputs: {json.dumps(asdict(inputs))}\n"
        f"Results: {json.dumps(headline)}\n"
    )


def parse_advice(payload: dict) -> AdvisoryResult:
    """
    Extract the advisory object from a generateContent response.

    Raises:
        ValueError: If the response carries no usable text
        ValidationError: If the text is not a well-formed advisory object
    """
    candidates = payload.get("candidates") or []
    if not candidates:
        raise ValueError("No candidates in advisory response")

    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts).strip()
    if not text:
        raise ValueError("Empty advisory response")

    return AdvisoryResult.model_validate(json.loads(text))


class AdvisoryService:
    """Advisory commentary with Gemini integration."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        settings = get_settings()
        self.api_key = settings.gemini_api_key
        self.model = settings.gemini_model
        self.base_url = settings.gemini_api_base_url.rstrip("/")
        self.timeout = settings.advisory_timeout_seconds
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def advise(
        self,
        mode: Mode,
        inputs: ProjectionInputs,
        result: CalculationResult,
    ) -> AdvisoryResult:
        """
        Generate commentary for a projection.

        Args:
            mode: Projection mode
            inputs: Parameters the projection ran with
            result: The numeric result (never modified)

        Returns:
            Model-generated advice, or a fallback object on any failure
        """
        if not self.api_key:
            logger.warning("Gemini API key missing; returning default advice")
            return NOT_CONFIGURED_ADVICE.model_copy(deep=True)

        body = {
            "systemInstruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
            "contents": [
                {"role": "user", "parts": [{"text": build_prompt(mode, inputs, result)}]}
            ],
            "generationConfig": {"responseMimeType": "application/json"},
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=body,
                )
                response.raise_for_status()

            advice = parse_advice(response.json())
            logger.info(f"Generated advice for {Mode(mode).value} projection")
            return advice

        except httpx.TimeoutException:
            logger.error("Advisory request timed out")
        except httpx.HTTPError as e:
            logger.error(f"Advisory request failed: {str(e)}")
        except (ValueError, ValidationError) as e:
            logger.error(f"Malformed advisory response: {str(e)}")
        except Exception as e:
            logger.exception(f"Unexpected advisory error: {str(e)}")

        return UNAVAILABLE_ADVICE.model_copy(deep=True)


# Singleton instance
_advisory_service: Optional[AdvisoryService] = None


def get_advisory_service() -> AdvisoryService:
    """Get the advisory service singleton."""
    global _advisory_service
    if _advisory_service is None:
        _advisory_service = AdvisoryService()
    return _advisory_service
