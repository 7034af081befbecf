import json
import logging
from pathlib import Path

from pydantic import ValidationError

from tuitionmatch.domain.errors import CatalogUnavailableError
from tuitionmatch.domain.models import CardRecord

logger = logging.getLogger(__name__)


class CatalogStore:
    def __init__(self, catalog_file: str):
        self.catalog_file = Path(catalog_file)

    def load_cards(self) -> list[CardRecord]:
        if not self.catalog_file.exists():
            raise CatalogUnavailableError(f"Card catalog not found: {self.catalog_file}")

        try:
            with self.catalog_file.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
            cards = [CardRecord.model_validate(item) for item in data]
        except (json.JSONDecodeError, ValidationError) as exc:
            raise CatalogUnavailableError(f"Card catalog is invalid: {self.catalog_file}") from exc

        active = [card for card in cards if card.active]
        logger.debug("Loaded %d active of %d cards from %s", len(active), len(cards), self.catalog_file)
        return active
