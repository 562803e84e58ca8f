# caniuse_lookup/src/services/caniuse_client.py
import logging
from typing import Any, Dict, List, Optional

import requests

from ..config.config_loader import AppConfig
from ..interfaces.compat_interface import CompatDataInterface
from ..models.errors import EmptyResultError, NetworkError, ParseError
from ..models.feature_models import FeatureRecord
from ..utils.response_parser import ResponseParser

logger = logging.getLogger(__name__)


class CaniuseClient(CompatDataInterface):
    """Client for the caniuse.com search and feature data endpoints"""

    def __init__(self, config: Optional[AppConfig] = None):
        self.config = config or AppConfig()
        self.parser = ResponseParser()
        self.headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    def search(self, search_term: str) -> List[str]:
        if not search_term or not search_term.strip():
            raise ValueError("Search term must not be empty")

        logger.info(f"Searching for feature IDs for term: '{search_term}'")
        payload = self._get_json(self.config.search_url, {"search": search_term})
        feature_ids = self.parser.extract_feature_ids(payload)
        logger.debug(f"Parsed feature IDs: {feature_ids}")

        if not feature_ids:
            raise EmptyResultError(f"No feature IDs found for '{search_term}'", search_term=search_term)
        return feature_ids

    def get_features(self, feature_ids: List[str]) -> Dict[str, FeatureRecord]:
        if not feature_ids:
            raise ValueError("No feature IDs provided")

        logger.info(f"Fetching data for feature IDs: {', '.join(feature_ids)}")
        params = {"type": "support-data", "feat": ",".join(feature_ids)}
        payload = self._get_json(self.config.feature_data_url, params)
        if isinstance(payload, list) and not payload:
            raise EmptyResultError("Feature data response contained no records")

        features = self.parser.extract_feature_records(payload, feature_ids)
        if not features:
            raise EmptyResultError("None of the requested features were returned")
        logger.info(f"Successfully parsed data for {len(features)} feature(s)")
        return features

    def _get_json(self, url: str, params: Dict[str, str]) -> Any:
        """GET a URL and decode the JSON body, mapping failures to lookup errors"""
        logger.debug(f"Requesting URL: {url} params={params}")
        try:
            response = requests.get(url, params=params, headers=self.headers, timeout=self.config.timeout)
            logger.info(f"Response status: {response.status_code}")
            logger.debug(f"Response body: {response.text}")
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"Request to {url} timed out after {self.config.timeout}s") from e
        except requests.exceptions.HTTPError as e:
            raise NetworkError(f"API request failed with status: {response.status_code}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Response from {url} is not valid JSON") from e
