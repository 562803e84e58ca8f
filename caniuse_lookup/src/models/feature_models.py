"""Data models for caniuse feature lookups"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

# A support value is a version token, a boolean, an MDN-style object or a list of them
SupportValue = Union[bool, str, Dict[str, Any], List[Dict[str, Any]]]


class SupportLevel(Enum):
    """Support markers shown in the browser column"""
    SUPPORTED = "✅"
    UNSUPPORTED = "❌"
    PARTIAL = "🟨"
    UNKNOWN = "❓"


@dataclass
class FeatureRecord:
    """Compatibility record returned by the data endpoint"""
    title: str = ""
    description: Optional[str] = None
    spec: Optional[str] = None
    status: Optional[str] = None
    mdn_url: Optional[str] = None
    support: Optional[Dict[str, SupportValue]] = None
    stats: Optional[Dict[str, Dict[str, str]]] = None
    notes_by_num: Optional[Dict[str, str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class BrowserSupportRow:
    """One row of the browser compatibility table"""
    browser: str
    level: SupportLevel
    support: str
    notes: str = ""


@dataclass
class LookupResult:
    """Outcome of one search term lookup"""
    search_term: str
    feature_ids: List[str]
    features: Dict[str, FeatureRecord]
