"""FastAPI dependencies for chainkit components."""

from typing import Annotated

from fastapi import Depends

from ..config import ChainkitSettings, get_settings_dep
from ..llm.factory import LLMFactory
from ..service.chain_service import ChainService


def get_llm_factory(
    settings: Annotated[ChainkitSettings, Depends(get_settings_dep)],
) -> LLMFactory:
    """LLM factory resolving per-request model parameters against settings."""
    return LLMFactory(settings)


def get_chain_service(
    settings: Annotated[ChainkitSettings, Depends(get_settings_dep)],
    llm_factory: Annotated[LLMFactory, Depends(get_llm_factory)],
) -> ChainService:
    """Chain service; override in tests to inject fakes."""
    return ChainService(settings, llm_factory)
