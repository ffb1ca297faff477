"""
Response gateway — one remote generation request per turn.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from mindmate.config import Settings
from mindmate.errors import TransportError
from mindmate.models.emotion import EmotionLabel
from mindmate.models.envelope import GenerationRequest, GenerationResponse
from mindmate.transport.http import HttpClient

logger = logging.getLogger(__name__)


class ResponseGateway:
    def __init__(self, http: HttpClient, settings: Optional[Settings] = None):
        self._http = http
        self._settings = settings or Settings()

    def build_request(self, user_text: str, emotion: EmotionLabel) -> GenerationRequest:
        prompt = self._settings.prompt_template.format(message=user_text, emotion=EmotionLabel(emotion).value)
        return GenerationRequest(
            system=self._settings.system_prompt,
            message=prompt,
            assistant_name=self._settings.assistant_name,
        )

    async def generate(self, user_text: str, emotion: EmotionLabel) -> str:
        """Ask the remote service for a reply.

        Raises ValueError for blank input and TransportError for any failure
        to obtain a non-empty reply.
        """
        if not user_text.strip():
            raise ValueError("user_text must not be blank")
        request = self.build_request(user_text, emotion)
        logger.debug("Requesting reply (emotion=%s)", emotion)
        payload = await self._http.post(request.model_dump(by_alias=True))
        try:
            reply = GenerationResponse.model_validate(payload).response
        except ValidationError as e:
            raise TransportError("Response payload has no usable 'response' field", details={"payload": payload}) from e
        if not reply.strip():
            raise TransportError("Empty reply from generation service")
        return reply
