from __future__ import annotations

"""
Code Generation Service.

Sends the change request and the current project to the Gemini API through
the Google GenAI SDK and parses the structured JSON reply into domain
objects. Every failure at this boundary is surfaced as a GenerationError
carrying one user-facing message; the caller's tree is never touched here.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from google import genai
from google.genai import types

from webstudio4ai.core.services.prompts import RESPONSE_SCHEMA, SYSTEM_INSTRUCTION, build_prompt
from webstudio4ai.domain.config import GeneratorSettings
from webstudio4ai.domain.errors import GenerationError
from webstudio4ai.domain.operations import GenerationResult, Operation, parse_operation
from webstudio4ai.domain.vfs_models import Tree

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = (
    "Failed to get a valid response from the AI. The model may be configured "
    "incorrectly or the response was not valid JSON."
)


class CodeGenerator(ABC):
    """
    Abstract producer of file operations for a change request.
    """

    @abstractmethod
    def generate(self, prompt: str, tree: Tree) -> GenerationResult:
        """
        Propose changes for the given project.

        Args:
            prompt: Natural language change request.
            tree: Current project snapshot.

        Returns:
            GenerationResult: Reasoning, ordered operations and preview HTML.

        Raises:
            GenerationError: If the service fails or replies with bad data.
        """


class GeminiCodeGenerator(CodeGenerator):
    """
    Gemini implementation using structured JSON output.
    """

    def __init__(self, settings: Optional[GeneratorSettings] = None) -> None:
        self.settings = settings or GeneratorSettings()
        self._client: Optional[Any] = None

    def generate(self, prompt: str, tree: Tree) -> GenerationResult:
        full_prompt = build_prompt(prompt, tree)
        logger.info(f"Requesting generation from model '{self.settings.model_id}'.")

        try:
            response = self._get_client().models.generate_content(
                model=self.settings.model_id,
                contents=full_prompt,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_INSTRUCTION,
                    response_mime_type="application/json",
                    response_schema=RESPONSE_SCHEMA,
                ),
            )
            text = response.text
        except GenerationError:
            raise
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}")
            raise GenerationError(GENERIC_FAILURE_MESSAGE) from e

        return parse_generation_response(text)

    def _get_client(self) -> Any:
        if self._client is None:
            api_key = os.environ.get(self.settings.api_key_env)
            if not api_key:
                logger.error(f"{self.settings.api_key_env} missing from environment variables.")
                raise GenerationError(
                    f"No API key found. Set the {self.settings.api_key_env} environment variable."
                )
            self._client = genai.Client(api_key=api_key)
        return self._client


def parse_generation_response(text: Optional[str]) -> GenerationResult:
    """
    Decode the model's JSON reply into a GenerationResult.

    Args:
        text: Raw response body.

    Returns:
        GenerationResult: Parsed result with typed operations.

    Raises:
        GenerationError: On empty, non-JSON or schema-violating replies.
    """
    if not text or not text.strip():
        logger.error("Gemini API returned an empty response.")
        raise GenerationError(GENERIC_FAILURE_MESSAGE)

    try:
        data = json.loads(text.strip())
    except ValueError as e:
        logger.error(f"Gemini API response is not valid JSON: {e}")
        raise GenerationError(GENERIC_FAILURE_MESSAGE) from e

    if not isinstance(data, dict):
        logger.error("Gemini API response root is not an object.")
        raise GenerationError(GENERIC_FAILURE_MESSAGE)

    reasoning = data.get("reasoning")
    raw_operations = data.get("operations")
    html_output = data.get("html_output")

    if not isinstance(reasoning, str) or not isinstance(html_output, str):
        logger.error("Gemini API response is missing 'reasoning' or 'html_output'.")
        raise GenerationError(GENERIC_FAILURE_MESSAGE)
    if not isinstance(raw_operations, list):
        logger.error("Gemini API response 'operations' is not an array.")
        raise GenerationError(GENERIC_FAILURE_MESSAGE)

    operations: List[Operation] = []
    for i, item in enumerate(raw_operations):
        if not isinstance(item, dict):
            logger.error(f"Gemini API operation #{i} is not an object.")
            raise GenerationError(GENERIC_FAILURE_MESSAGE)
        operations.append(parse_operation(item))

    logger.debug(f"Parsed {len(operations)} operations from model response.")
    return GenerationResult(reasoning=reasoning, operations=operations, html_output=html_output)
