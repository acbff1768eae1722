"""Organization catalog and derived aliases."""

from fastapi import APIRouter, HTTPException

from bandhub.aliases import generate_aliases

from ..state import get_state

router = APIRouter()


def _get_org_or_404(org_id: str):
    org = get_state().store.get_organization(org_id)
    if org is None:
        raise HTTPException(status_code=404, detail=f"Organization with ID {org_id} not found")
    return org


@router.get("")
def list_organizations():
    orgs = get_state().store.get_organizations()
    return {"organizations": orgs, "total": len(orgs)}


@router.get("/{org_id}")
def get_organization(org_id: str):
    org = _get_org_or_404(org_id)
    return {
        **org.model_dump(),
        "video_count": get_state().store.count_by_organization(org_id),
    }


@router.get("/{org_id}/aliases")
def get_aliases(org_id: str):
    """Aliases derived for matching (never stored)."""
    org = _get_org_or_404(org_id)
    aliases = generate_aliases(org, get_state().matching_config.all_star_bands)
    return {"org_id": org.id, "aliases": list(aliases)}
