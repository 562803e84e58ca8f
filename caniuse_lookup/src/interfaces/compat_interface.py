"""Interface for compatibility data clients"""

from abc import ABC, abstractmethod
from typing import Dict, List

from ..models.feature_models import FeatureRecord


class CompatDataInterface(ABC):
    """Abstract base class for compatibility data clients"""

    @abstractmethod
    def search(self, search_term: str) -> List[str]:
        """Find feature identifiers matching a search term

        Args:
            search_term: Free-text search term

        Returns:
            Ordered list of feature identifiers
        """
        pass

    @abstractmethod
    def get_features(self, feature_ids: List[str]) -> Dict[str, FeatureRecord]:
        """Fetch full records for the given identifiers

        Args:
            feature_ids: Non-empty list of feature identifiers

        Returns:
            Mapping of identifier to FeatureRecord, in identifier order
        """
        pass
