"""Feature lookup service"""

import logging
from typing import Optional

from ..interfaces.compat_interface import CompatDataInterface
from ..models.feature_models import LookupResult

logger = logging.getLogger(__name__)


class CompatLookupService:
    """Service running the search then data lookup for one term"""

    def __init__(self, client: CompatDataInterface):
        """
        Initialize lookup service.

        Args:
            client: Implementation of the compatibility data client.
        """
        self.client = client

    def lookup(self, search_term: str, limit: Optional[int] = None) -> LookupResult:
        """
        Resolve a search term into full feature records.

        Args:
            search_term (str): Free-text search term.
            limit (int, optional): Keep only the first N identifiers.

        Returns:
            LookupResult: The identifiers sent to the data endpoint and the
            records it returned.
        """
        feature_ids = self.client.search(search_term)
        if limit is not None and limit < len(feature_ids):
            logger.info(f"Limiting {len(feature_ids)} feature IDs to {limit}")
            feature_ids = feature_ids[:limit]

        features = self.client.get_features(feature_ids)
        return LookupResult(search_term=search_term, feature_ids=feature_ids, features=features)
