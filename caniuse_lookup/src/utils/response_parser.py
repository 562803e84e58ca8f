# caniuse_lookup/src/utils/response_parser.py
import logging
from typing import Any, Dict, List

from ..models.errors import ParseError
from ..models.feature_models import FeatureRecord

logger = logging.getLogger(__name__)

KNOWN_FIELDS = ("title", "description", "spec", "status", "mdn_url", "support", "stats", "notes_by_num")


class ResponseParser:
    """Utility class for turning caniuse API payloads into models."""

    def extract_feature_ids(self, payload: Any) -> List[str]:
        """
        Extract the feature identifiers from a search response.

        Expected structure:
        {
            "featureIds": ["mdn-api_websocketstream", "websockets"]
        }

        Duplicates are dropped, keeping the first occurrence.
        """
        if not isinstance(payload, dict) or "featureIds" not in payload:
            raise ParseError("Search response has no 'featureIds' member")
        feature_ids = payload["featureIds"]
        if not isinstance(feature_ids, list) or not all(isinstance(i, str) for i in feature_ids):
            raise ParseError("Search response 'featureIds' is not a list of strings")
        return list(dict.fromkeys(feature_ids))

    def extract_feature_records(self, payload: Any, feature_ids: List[str]) -> Dict[str, FeatureRecord]:
        """
        Match data endpoint records to the requested identifiers.

        Records carrying an "id" member are matched by it; the rest are
        matched by position in the request.
        """
        if not isinstance(payload, list):
            raise ParseError("Feature data response is not a JSON array")
        if not all(isinstance(item, dict) for item in payload):
            raise ParseError("Feature data response contains non-object entries")

        by_id = {item["id"]: item for item in payload if isinstance(item.get("id"), str)}
        records = {}
        for position, feature_id in enumerate(feature_ids):
            if feature_id in by_id:
                data = by_id[feature_id]
            elif position < len(payload) and "id" not in payload[position]:
                data = payload[position]
            else:
                logger.info(f"No data returned for feature ID: {feature_id}")
                continue
            records[feature_id] = self.parse_feature(data)
        return records

    def parse_feature(self, data: Dict[str, Any]) -> FeatureRecord:
        """Build a FeatureRecord, keeping unknown keys in extra."""
        support = data.get("support")
        stats = data.get("stats")
        notes = data.get("notes_by_num")
        for name, value in (("support", support), ("stats", stats), ("notes_by_num", notes)):
            if value is not None and not isinstance(value, dict):
                raise ParseError(f"Feature '{name}' member is not an object")

        return FeatureRecord(
            title=self._text(data.get("title")),
            description=data.get("description"),
            spec=data.get("spec"),
            status=data.get("status"),
            mdn_url=data.get("mdn_url"),
            support=support,
            stats=stats,
            notes_by_num={str(k): self._text(v) for k, v in notes.items()} if notes else notes,
            extra={k: v for k, v in data.items() if k not in KNOWN_FIELDS},
        )

    @staticmethod
    def _text(value: Any) -> str:
        return "" if value is None else str(value)
