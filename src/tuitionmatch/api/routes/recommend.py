from fastapi import APIRouter, Depends, HTTPException

from tuitionmatch.agents.orchestrator import RecommendationOrchestrator
from tuitionmatch.config import settings
from tuitionmatch.domain.errors import CatalogUnavailableError, MatchingInputError
from tuitionmatch.repository.catalog_store import CatalogStore
from tuitionmatch.schemas.requests import RecommendRequest
from tuitionmatch.schemas.responses import RecommendResponse

router = APIRouter(tags=["recommend"])
orchestrator = RecommendationOrchestrator(CatalogStore(settings.card_catalog_file), settings.engine_config())


def get_orchestrator() -> RecommendationOrchestrator:
    return orchestrator


@router.post("/recommend", response_model=RecommendResponse)
def recommend(
    request: RecommendRequest,
    service: RecommendationOrchestrator = Depends(get_orchestrator),
) -> RecommendResponse:
    try:
        return service.recommend(request)
    except MatchingInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except CatalogUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
