"""
Client for the Gemini generative backend.
"""

from typing import Optional

from google import genai
from google.genai import errors, types
from pydantic import ValidationError

from tubetrans.config import config
from tubetrans.core import prompts
from tubetrans.models.schemas import VideoDetails, TranslationConfig
from tubetrans.utils.error_handling import (
    EmptyResponseError,
    MalformedResponseError,
    ServiceUnavailableError,
)
from tubetrans.utils.logger import logging


class GeminiClient:
    """Class to handle the transcript and translation requests."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[genai.Client] = None,
        translation_config: Optional[TranslationConfig] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Gemini API key (if None, the configured key is used)
            model: Model name for both requests
            client: Pre-built SDK client, mostly for tests
            translation_config: Settings for translation requests
        """
        self.api_key = api_key or config.GEMINI_API_KEY
        self.model = model or config.DEFAULT_MODEL
        self.translation_config = translation_config or TranslationConfig(model=self.model)
        self._client = client

    @property
    def client(self) -> genai.Client:
        # Built on first use so a missing key surfaces as a failed request
        if self._client is None:
            try:
                self._client = genai.Client(api_key=self.api_key)
            except ValueError as e:
                raise ServiceUnavailableError(f"Could not create Gemini client: {e}") from e
        return self._client

    async def _generate(self, contents: str, model: str, generation_config: types.GenerateContentConfig):
        try:
            return await self.client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=generation_config,
            )
        except errors.APIError as e:
            logging.error(f"Gemini API error {e.code}: {e.message}")
            raise ServiceUnavailableError(f"Gemini API error: {e.message}", status_code=e.code) from e
        except ServiceUnavailableError:
            raise
        except Exception as e:
            logging.error(f"Error calling Gemini: {str(e)}")
            raise ServiceUnavailableError(f"Error calling Gemini: {str(e)}") from e

    async def request_transcript(self, url: str) -> VideoDetails:
        """
        Ask the model for the title, author and transcript of a video.

        Args:
            url: YouTube video URL, embedded verbatim in the prompt

        Returns:
            VideoDetails parsed from the JSON reply

        Raises:
            ServiceUnavailableError: If the request itself failed
            MalformedResponseError: If the reply is not valid VideoDetails JSON
        """
        generation_config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=VideoDetails,
            tools=[types.Tool(google_search=types.GoogleSearch())],
        )

        logging.info(f"Requesting transcript for: {url}")
        response = await self._generate(
            prompts.transcript_template.format(url=url), self.model, generation_config
        )

        text = response.text
        if not text:
            raise MalformedResponseError("Gemini returned an empty transcript reply.", raw_text=text)

        try:
            details = VideoDetails.model_validate_json(text)
        except ValidationError as e:
            logging.error(f"Could not parse transcript reply: {e}")
            raise MalformedResponseError("Gemini returned an unusable transcript reply.", raw_text=text) from e

        logging.info(f"Transcript received: '{details.title}' by {details.author}")
        return details

    async def request_translation(self, text: str) -> str:
        """
        Translate a transcript into the configured target language.

        Args:
            text: Transcript text

        Returns:
            The translated text

        Raises:
            ServiceUnavailableError: If the request itself failed
            EmptyResponseError: If the model returned no text
        """
        language = self.translation_config.target_language
        generation_config = types.GenerateContentConfig(
            system_instruction=prompts.translator_system_instruction.format(language=language),
            temperature=self.translation_config.temperature,
        )

        logging.info(f"Requesting {language} translation of {len(text)} characters")
        response = await self._generate(
            prompts.translation_template.format(language=language, text=text),
            self.translation_config.model,
            generation_config,
        )

        translation = response.text
        if not translation or not translation.strip():
            logging.error("Gemini returned an empty translation")
            raise EmptyResponseError("Gemini returned an empty translation.")
        return translation
