import logging

from tuitionmatch.domain.models import EngineConfig
from tuitionmatch.engine.explainer import explain_split
from tuitionmatch.engine.matcher import match_cards
from tuitionmatch.repository.catalog_store import CatalogStore
from tuitionmatch.schemas.requests import RecommendRequest
from tuitionmatch.schemas.responses import RecommendResponse

logger = logging.getLogger(__name__)


class RecommendationOrchestrator:
    def __init__(self, catalog_store: CatalogStore, config: EngineConfig | None = None):
        self.catalog_store = catalog_store
        self.config = config or EngineConfig()

    def recommend(self, request: RecommendRequest) -> RecommendResponse:
        criteria = request.to_criteria()
        cards = self.catalog_store.load_cards()
        result = match_cards(cards, criteria, self.config)

        recommendations = result.recommendations
        if request.limit is not None:
            recommendations = recommendations[: request.limit]

        best = recommendations[0] if recommendations else None
        logger.info(
            "Matched %d of %d cards for tuition %.2f; best=%s split=%s",
            result.total_eligible,
            result.total_candidates,
            criteria.tuition_amount,
            best.card.name if best else None,
            len(result.split_strategy.cards) if result.split_strategy else 0,
        )

        return RecommendResponse(
            best_card=best,
            recommendations=recommendations,
            split_strategy=result.split_strategy,
            split_explanation=explain_split(result.split_strategy) if result.split_strategy else None,
            criteria=criteria,
            total_eligible=result.total_eligible,
        )
