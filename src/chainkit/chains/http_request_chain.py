"""Chain that fetches an HTTP resource and has the model summarize it."""

import logging
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

from ..http.requests_wrapper import TextRequestsWrapper
from ..llm.base import LLMClient
from ..prompts.http import HTTP_RESPONSE_PROMPT
from ..prompts.template import PromptTemplate

from .base import Chain
from .llm_chain import LLMChain

logger = logging.getLogger(__name__)

QUESTION_KEY = "question"
OUTPUT_KEY = "output"


def build_url_with_parameters(api_url: str, parameters: Optional[dict[str, Any]] = None) -> str:
    """Append url-encoded query parameters; parameters whose value is None are skipped."""
    query = urlencode({k: str(v) for k, v in (parameters or {}).items() if v is not None})
    if not query:
        return api_url
    return f"{api_url}?{query}"


class HttpRequestChain(Chain):
    """GET ``api_url`` and answer ``question`` from the response body."""

    def __init__(self, api_answer_chain: LLMChain, requests_wrapper: TextRequestsWrapper, api_url: str):
        self.api_answer_chain = api_answer_chain
        self.requests_wrapper = requests_wrapper
        self.api_url = api_url.strip()

    @classmethod
    def using_api_url(
        cls,
        llm: LLMClient,
        api_url: str,
        parameters: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, Optional[str]]] = None,
        prompt: PromptTemplate = HTTP_RESPONSE_PROMPT,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "HttpRequestChain":
        requests_wrapper = TextRequestsWrapper(headers, timeout=timeout, transport=transport)
        return cls(LLMChain(llm, prompt), requests_wrapper, build_url_with_parameters(api_url, parameters))

    @property
    def chain_type(self) -> str:
        return "http_request_chain"

    @property
    def input_keys(self) -> list[str]:
        return [QUESTION_KEY]

    @property
    def output_keys(self) -> list[str]:
        return [OUTPUT_KEY]

    def _call(self, inputs: dict[str, Any]) -> dict[str, Any]:
        api_response = self.requests_wrapper.get(self.api_url)
        logger.debug("API response: %s", api_response[:500])
        answer = self.api_answer_chain.predict(
            question=inputs[QUESTION_KEY],
            api_url=self.api_url,
            api_response=api_response,
        )
        return {OUTPUT_KEY: answer.strip()}
