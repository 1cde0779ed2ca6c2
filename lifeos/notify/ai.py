"""
AI analyst.

Sends day logs to Gemini and returns blunt annotations. Runs only after
a day is scored; nothing it returns feeds back into scores, locks or
streaks. Failures never raise, they fall back to fixed text.
"""

import base64
import json
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

import requests

from lifeos.core.config import Config
from lifeos.core.models import DayLog, ThinkingQuality
from lifeos.engine.history import sort_by_date

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

TONE = "BLUNT, DATA-DRIVEN, UNCOMFORTABLE TRUTH. NO MOTIVATION."
SILENT_TONE = "DATA ONLY. NO ENCOURAGEMENT, NO PRAISE. STATE NUMBERS AND PENALTIES."


@dataclass
class DailyAnalysis:
    """AI annotations for one day."""
    text: str
    daily_direction: str
    reality_check: str
    thinking_quality: ThinkingQuality


FALLBACK_ANALYSIS = DailyAnalysis(
    text="Error generating analysis.",
    daily_direction="Resume discipline.",
    reality_check="Data unavailable.",
    thinking_quality=ThinkingQuality.SURFACE,
)

WEEKLY_FALLBACK = "Could not generate report."

PHOTO_PROMPT = "Analyze this photo for signs of fatigue, weakness, or strength. Compare to Top 1% standard."
PHOTO_FALLBACK = "Failed to analyze image."
CHAT_FALLBACK = "Connection error."
DEEP_THINKING_BUDGET = 32768


def _parse_thinking_quality(value) -> ThinkingQuality:
    try:
        return ThinkingQuality(value)
    except ValueError:
        return ThinkingQuality.SURFACE


class AIAnalyst:
    """
    Gemini client for daily analysis, weekly reports, photo audits and chat.
    """

    def __init__(self, config: Config):
        self.config = config
        self.api_key = config.gemini_api_key
        self.model = config.gemini_model
        self.tone = SILENT_TONE if config.silent_mode else TONE

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _generate(
        self,
        prompt: Optional[str] = None,
        as_json: bool = False,
        contents: Optional[List[dict]] = None,
        generation_config: Optional[dict] = None,
    ) -> Optional[str]:
        """
        Call generateContent and return the first candidate's text.

        Either a plain prompt or full multi-part contents. Returns None
        on any failure.
        """
        if not self.is_configured:
            logger.warning("Gemini not configured, skipping analysis")
            return None

        body = {"contents": contents or [{"parts": [{"text": prompt}]}]}
        config = dict(generation_config or {})
        if as_json:
            config["responseMimeType"] = "application/json"
        if config:
            body["generationConfig"] = config

        try:
            response = requests.post(
                GEMINI_URL.format(model=self.model),
                params={"key": self.api_key},
                json=body,
                timeout=60,
            )
            response.raise_for_status()
            data = response.json()

            parts = data["candidates"][0]["content"]["parts"]
            return "".join(part.get("text", "") for part in parts)

        except requests.RequestException as e:
            logger.error(f"Gemini request failed: {e}")
            return None
        except (KeyError, IndexError, ValueError) as e:
            logger.error(f"Unexpected Gemini response: {e}")
            return None

    def build_daily_prompt(self, log: DayLog) -> str:
        answers = log.answers or {}
        return f"""
Analyze my daily life data against Top 1% Performer Standards.
Tone: {self.tone}

Data:
- Creation Minutes: {answers.get('creationMinutes')}
- Consumption Minutes: {answers.get('consumptionMinutes')} (Ratio: {log.creation_ratio})
- Deep Thought: "{answers.get('thinkingContent')}"
- Excuse: "{answers.get('excuseType')}"
- Money Spent: {answers.get('moneySpent')} ({answers.get('spendingCategory')})

Identity:
- Face Match: {answers.get('faceMatch')}
- Identity Match: {answers.get('identityCheck')}

Tasks:
1. DAILY DIRECTION: ONE sentence directive for tomorrow. An action command. No quotes.
2. REALITY CHECK: Compare my performance to a statistical standard.
3. THINKING QUALITY: Classify my "Deep Thought" as Surface, Practical, Strategic, or Long-term.
4. ANALYSIS: A ruthless audit of my day. Name the specific "Time Thief" and "Weakness".

Response Format (JSON):
{{
    "dailyDirection": "string",
    "realityCheck": "string",
    "thinkingQuality": "Surface" | "Practical" | "Strategic" | "Long-term",
    "analysisText": "string"
}}
"""

    def analyze_day(self, log: DayLog) -> DailyAnalysis:
        """
        Annotate one scored day.

        Missing fields in the reply get fixed defaults.
        """
        raw = self._generate(self.build_daily_prompt(log), as_json=True)
        if raw is None:
            return FALLBACK_ANALYSIS

        try:
            result = json.loads(raw)
        except ValueError as e:
            logger.error(f"Gemini analysis was not JSON: {e}")
            return FALLBACK_ANALYSIS

        if not isinstance(result, dict):
            logger.error("Gemini analysis was not a JSON object")
            return FALLBACK_ANALYSIS

        analysis = DailyAnalysis(
            text=result.get("analysisText") or "Analysis failed.",
            daily_direction=result.get("dailyDirection") or "Do the work.",
            reality_check=result.get("realityCheck") or "You are average.",
            thinking_quality=_parse_thinking_quality(result.get("thinkingQuality")),
        )

        logger.info(f"AI analysis for {log.date}: {analysis.thinking_quality.value}")
        return analysis

    def build_weekly_prompt(self, logs: List[DayLog]) -> str:
        data = [
            {
                "date": log.date.isoformat(),
                "ratio": log.creation_ratio,
                "pressure": log.pressure_level.value if log.pressure_level else None,
                "excuse": (log.answers or {}).get("excuseType"),
            }
            for log in logs
        ]
        return f"""
Generate a WEEKLY TRUTH REPORT (Top 1% Standard).
Tone: {self.tone}

Data: {json.dumps(data)}

Output Sections:
1. Environment Audit: Who/What wasted time?
2. Weakness Mode: What is being avoided?
3. Failure Archive: Pattern of excuses.
4. Direction: Upward, Flat, or Declining?
"""

    def weekly_report(self, records: Iterable[DayLog], days: int = 7) -> str:
        """Free-text report over the most recent logs."""
        recent = sort_by_date(records)[-days:]
        text = self._generate(self.build_weekly_prompt(recent))
        return text or WEEKLY_FALLBACK

    def analyze_photo(self, path: str, prompt: Optional[str] = None) -> str:
        """
        Audit an identity photo.

        The image is sent inline as base64 next to the text prompt.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            logger.error(f"Could not read photo {path}: {e}")
            return PHOTO_FALLBACK

        mime_type = mimetypes.guess_type(str(path))[0] or "image/jpeg"
        contents = [{
            "parts": [
                {"inline_data": {
                    "mime_type": mime_type,
                    "data": base64.b64encode(data).decode("ascii"),
                }},
                {"text": prompt or PHOTO_PROMPT},
            ],
        }]

        text = self._generate(contents=contents)
        return text or PHOTO_FALLBACK

    def chat(self, history: List[dict], message: str, deep: bool = False) -> str:
        """
        One turn with the assistant.

        history holds earlier turns as {"role": "user" | "model", "parts": [...]}.
        deep asks for an extended thinking budget.
        """
        contents = list(history) + [{"role": "user", "parts": [{"text": message}]}]
        generation_config = {"thinkingConfig": {"thinkingBudget": DEEP_THINKING_BUDGET}} if deep else None

        text = self._generate(contents=contents, generation_config=generation_config)
        return text or CHAT_FALLBACK
