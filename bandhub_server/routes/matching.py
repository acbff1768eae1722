"""Matching preview: run the attribution decision on ad-hoc text without writing."""

from fastapi import APIRouter

from bandhub.aliases import build_alias_index
from bandhub.matching import decide_attribution, is_battle_video, rank_matches

from ..models import MatchPreviewRequest, MatchPreviewResponse
from ..state import get_state

router = APIRouter()


@router.post("/preview", response_model=MatchPreviewResponse)
def preview_match(request: MatchPreviewRequest):
    state = get_state()
    config = state.matching_config
    if request.min_confidence is not None:
        config = config.model_copy(update={"min_confidence": request.min_confidence})
    index = build_alias_index(state.store.get_organizations(), config.all_star_bands)
    text = " ".join([request.title, request.description, request.channel_label])
    outcome = decide_attribution("preview", text, index, config)
    matches = outcome.matches or (rank_matches(text, index, config) if text.strip() else [])
    return MatchPreviewResponse(
        matches=matches,
        is_battle=is_battle_video(text),
        outcome=outcome,
    )
