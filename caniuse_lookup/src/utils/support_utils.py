"""Browser support classification utilities"""

import re
from typing import Dict, List, Optional, Tuple

from ..models.feature_models import BrowserSupportRow, FeatureRecord, SupportLevel, SupportValue

NOTE_REF = re.compile(r"#(\w+)")
LEADING_NUMBER = re.compile(r"\d+(?:\.\d+)?")


UNSUPPORTED_TOKENS = {"false", "n", "no"}
PARTIAL_TOKENS = {"a", "partial", "p", "d"}
UNKNOWN_TOKENS = {"", "u", "unknown", "null"}


def support_level(value: str) -> SupportLevel:
    """Classify a displayed support value.

    Only the first whitespace-separated token counts, so "a x #2" is
    partial and "12 #1" is supported. Version tokens of any shape
    ("124", "≤79", "preview") mean supported.
    """
    parts = value.split()
    token = parts[0].lower() if parts else ""
    if token in UNSUPPORTED_TOKENS:
        return SupportLevel.UNSUPPORTED
    if token in PARTIAL_TOKENS:
        return SupportLevel.PARTIAL
    if token in UNKNOWN_TOKENS:
        return SupportLevel.UNKNOWN
    return SupportLevel.SUPPORTED


def resolve_notes(value: str, notes_by_num: Optional[Dict[str, str]]) -> str:
    """Expand '#N' references into '#N: text' lines"""
    if not notes_by_num:
        return ""
    lines = []
    for num in NOTE_REF.findall(value):
        if num in notes_by_num:
            lines.append(f"#{num}: {notes_by_num[num]}")
    return "\n".join(lines)


def _json_text(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def describe_support(value: SupportValue, notes_by_num: Optional[Dict[str, str]] = None) -> Tuple[SupportLevel, str, str]:
    """Return (level, displayed value, notes) for one support entry"""
    if isinstance(value, list):
        # MDN lists the current implementation first
        value = value[0] if value else None
    if isinstance(value, dict):
        value = value.get("version_added")
    if value is None:
        return SupportLevel.UNKNOWN, "unknown", ""

    text = _json_text(value)
    level = support_level(text)
    if "#" in text:
        return level, f"{text} (see notes)", resolve_notes(text, notes_by_num)
    return level, text, ""


def _version_rank(version: str) -> float:
    match = LEADING_NUMBER.match(version)
    return float(match.group()) if match else 0.0


def latest_stat(versions: Dict[str, str]) -> str:
    """Status string of the highest-numbered version"""
    if not versions:
        return ""
    # max() keeps the first of equal ranks, so input order breaks ties
    latest = max(versions, key=_version_rank)
    return str(versions[latest])


def build_support_rows(feature: FeatureRecord) -> List[BrowserSupportRow]:
    """Rows for the compatibility table, from support or else from stats"""
    rows = []
    if feature.support is not None:
        for browser, value in feature.support.items():
            level, support, notes = describe_support(value, feature.notes_by_num)
            rows.append(BrowserSupportRow(browser=browser, level=level, support=support, notes=notes))
    elif feature.stats:
        for browser, versions in feature.stats.items():
            status = latest_stat(versions) if isinstance(versions, dict) else ""
            level = support_level(status)
            notes = "see notes" if level == SupportLevel.PARTIAL else ""
            support = f"{status} (see notes)" if "#" in status else status
            rows.append(BrowserSupportRow(browser=browser, level=level, support=support, notes=notes))
    return rows
