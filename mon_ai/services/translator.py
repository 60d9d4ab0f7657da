from typing import Any, Optional
from langfuse import observe
from openai import AsyncOpenAI
import logging
import emoji
from mon_ai.core.exceptions import TranslationError, TranslatorConfigurationError
from mon_ai.utils.translator import build_prompt, parse_model_reply


class TranslationGateway:
    """Stateless proxy to an OpenAI-compatible chat-completion API.

    No local translation happens here: the prompt carries the sentence, the
    caller's vocabulary and grammar rules, and the model's JSON reply is
    relayed as-is.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = "gemini-2.5-flash",
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key
        self.model_name = model_name
        self.client = client
        if self.client is None and api_key:
            self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)

    @property
    def configured(self) -> bool:
        return bool(self.api_key) and self.client is not None

    @observe(name="translate", capture_input=False)
    async def translate(
        self, sentence: str, vocabulary: Any = None, grammar_rules: Any = None
    ) -> Any:
        """Translate ``sentence`` to Mon 🔄

        Raises ``TranslatorConfigurationError`` before any network call when
        no credential is set, and ``TranslationError`` when the call fails or
        the reply is not JSON.
        """
        if not self.configured:
            logging.error(f"{emoji.emojize(':warning:')} Translation requested but GEMINI_API_KEY is not set")
            raise TranslatorConfigurationError("Missing GEMINI_API_KEY on server")

        prompt = build_prompt(sentence, vocabulary, grammar_rules)
        try:
            response = await self.client.chat.completions.create(
                model=self.model_name,
                messages=[{"role": "user", "content": prompt}],
            )
            result = parse_model_reply(response.choices[0].message.content)
        except Exception as e:
            logging.error(f"{emoji.emojize(':warning:')} Translation error: {e}")
            raise TranslationError("Translation failed") from e

        logging.info(f"{emoji.emojize(':check_mark_button:')} Successfully translated to Mon")
        return result
