"""
Prompt builder endpoints.

Thin wrappers over the prompt engine:
- compose: selection state -> prompt text
- parse: pasted text -> selection state with a match summary
- select: one option click applied to a state
- disabled: framing options blocked by the current framing selection
- reconcile: keep manually typed lighting text across recompositions
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from ...models import (
    ComposeRequest,
    ComposeResponse,
    DisabledRequest,
    DisabledResponse,
    ParseRequest,
    ParseResponse,
    ReconcileRequest,
    SelectRequest,
    StateResponse,
)
from ...models.selection import SelectionState
from ...services import constraint_resolver, prompt_composer, prompt_parser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/prompt", tags=["prompt-builder"])


def _state_response(state: SelectionState) -> StateResponse:
    return StateResponse(
        state=state,
        prompt=prompt_composer.compose(state),
        disabled=constraint_resolver.disabled_options(
            state.selected(constraint_resolver.FRAMING_CATEGORY_ID)
        ),
    )


@router.post("/compose", response_model=ComposeResponse)
async def compose_prompt(request: ComposeRequest) -> ComposeResponse:
    prompt = prompt_composer.compose(request.state)
    return ComposeResponse(prompt=prompt, length=len(prompt))


@router.post("/parse", response_model=ParseResponse)
async def parse_prompt(request: ParseRequest) -> ParseResponse:
    """Recover selections from pasted text. Never fails on odd input."""
    parsed = prompt_parser.parse(request.text)
    summary = prompt_parser.match_summary(parsed)
    logger.info(f"🔍 Parsed pasted prompt: {len(summary)} matches")
    return ParseResponse(parsed=parsed, state=parsed.to_state(), summary=summary)


@router.post("/select", response_model=StateResponse)
async def select_option(request: SelectRequest) -> StateResponse:
    state = constraint_resolver.select_option(request.state, request.category_id, request.option_id)
    return _state_response(state)


@router.post("/disabled", response_model=DisabledResponse)
async def disabled_options(request: DisabledRequest) -> DisabledResponse:
    return DisabledResponse(disabled=constraint_resolver.disabled_options(request.selected_ids))


@router.post("/reconcile", response_model=StateResponse)
async def reconcile_manual_edit(request: ReconcileRequest) -> StateResponse:
    state = prompt_composer.reconcile_manual_edit(request.state, request.edited_text)
    return _state_response(state)


@router.get("/reset", response_model=StateResponse)
async def reset_state() -> StateResponse:
    """Fresh state with default negative prompt text."""
    return _state_response(constraint_resolver.reset_state())
