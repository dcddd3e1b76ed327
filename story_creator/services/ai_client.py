import logging
from typing import Any, Dict, List, Optional, Tuple

import requests
from pydantic import BaseModel

from story_creator.core.parser import parse_response
from story_creator.core.prompts import SYSTEM_PROMPT
from story_creator.core.settings import settings

logger = logging.getLogger(__name__)

FALLBACK_SEGMENT = "The path ahead seems uncertain as you consider your next move."
FALLBACK_CHOICES = ["Proceed with caution", "Try a different approach"]

# ——— Response schema ——————————————————————————————————

class Message(BaseModel):
    content: str

class Choice(BaseModel):
    message: Message

class ChatCompletion(BaseModel):
    choices: List[Choice]

# ——— Client ————————————————————————————————————————

class AIClient:
    """
    Thin wrapper around an OpenAI-style chat-completion endpoint.
    One POST per call, no retries.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()

    def _payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": settings.ai_model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": settings.max_tokens,
            "temperature": settings.temperature,
        }

    def request_text(self, prompt: str) -> str:
        """
        Send the prompt and return choices[0].message.content.
        Raises on transport, HTTP, JSON and schema errors
        (requests.RequestException, ValueError, pydantic.ValidationError).
        """
        headers = {
            "Authorization": f"Bearer {settings.bearer_token}",
            "Accept": "application/json",
        }
        logger.debug("POST %s (model=%s)", settings.ai_api_url, settings.ai_model)
        response = self.session.post(
            str(settings.ai_api_url),
            json=self._payload(prompt),
            headers=headers,
            timeout=settings.request_timeout,
        )
        response.raise_for_status()
        completion = ChatCompletion.model_validate(response.json())
        return completion.choices[0].message.content

    def generate(self, prompt: str) -> Tuple[str, List[str]]:
        """Return (segment, choices); falls back to fixed content on any failure."""
        try:
            raw = self.request_text(prompt)
        except Exception as e:
            logger.warning("API Error: %s", e)
            return FALLBACK_SEGMENT, list(FALLBACK_CHOICES)
        return parse_response(raw)

ai_client = AIClient()
