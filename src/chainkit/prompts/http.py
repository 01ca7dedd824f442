"""Prompt for summarizing an HTTP API response."""

from .template import PromptTemplate

_HTTP_RESPONSE_TEMPLATE = """Question: {question}

{api_url}

Here is the response from the API:

{api_response}

Summarize this response to answer the original question.

Summary:"""

HTTP_RESPONSE_PROMPT = PromptTemplate(
    _HTTP_RESPONSE_TEMPLATE,
    input_variables=["question", "api_url", "api_response"],
)
