from __future__ import annotations

import logging

from openai import OpenAI

from hotelbot.application.ports.free_text_responder import FreeTextResponderPort

SYSTEM_PROMPT = (
    "Eres el asistente de WhatsApp de {hotel_name}. Responde en una o dos frases, "
    "en el idioma del huésped. No confirmes reservas ni precios: para reservar, "
    "indica que escriba *hola* y elija la opción 1."
)


class OpenAIResponder(FreeTextResponderPort):
    def __init__(self, api_key: str, model: str, temperature: float, hotel_name: str, timeout: float = 10.0) -> None:
        self._client = OpenAI(api_key=api_key, timeout=timeout)
        self._model = model
        self._temperature = temperature
        self._system_prompt = SYSTEM_PROMPT.format(hotel_name=hotel_name)
        self._logger = logging.getLogger(__name__)

    def reply(self, user_text: str) -> str:
        response = self._client.chat.completions.create(
            model=self._model,
            temperature=self._temperature,
            messages=[
                {"role": "system", "content": self._system_prompt},
                {"role": "user", "content": user_text},
            ],
        )
        content = response.choices[0].message.content or ""
        return content.strip()
