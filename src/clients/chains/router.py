"""Chains API: completion, single chain and multi-chain pipeline endpoints."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.chainkit.api.deps import get_chain_service
from src.chainkit.config import ChainkitSettings, get_settings_dep
from src.chainkit.service import (
    ChainRequestPayload,
    ChainService,
    CompletionRequestPayload,
    MultipleChainsRequestPayload,
)

router = APIRouter(prefix="/llm/rest/v1", tags=["chains"])


class DefaultResponse(BaseModel):
    text: str


class ChainResponse(BaseModel):
    output: str


@router.get("", response_model=DefaultResponse)
def default_message(settings: ChainkitSettings = Depends(get_settings_dep)):
    """Service version."""
    return DefaultResponse(text=f"Version: {settings.APP_VERSION}!")


@router.post("/completion", response_model=ChainResponse)
def completion(
    payload: CompletionRequestPayload,
    service: ChainService = Depends(get_chain_service),
):
    """Single model call on the prompt."""
    return ChainResponse(output=service.complete(payload))


@router.post("/chain/{chain_type}", response_model=ChainResponse)
def process_chain(
    chain_type: str,
    payload: ChainRequestPayload,
    service: ChainService = Depends(get_chain_service),
):
    """Run one chain: llm | httpRequest | oracleDb."""
    return ChainResponse(output=service.invoke_chain(chain_type, payload))


@router.post("/chains", response_model=ChainResponse)
def process_chains(
    payload: MultipleChainsRequestPayload,
    service: ChainService = Depends(get_chain_service),
):
    """Run chains in order, feeding each output into the shared prompt, then answer it."""
    return ChainResponse(output=service.invoke_chains(payload))
