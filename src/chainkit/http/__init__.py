"""HTTP action target."""

from .requests_wrapper import TextRequestsWrapper

__all__ = ["TextRequestsWrapper"]
