# /discovery/parsing.py
"""
Turns whatever a search provider returns (a list of mappings, a JSON array
buried in prose or a markdown fence, or loosely structured numbered text) into
validated CandidateResource objects. Malformed entries are dropped.
"""

import json
import re
from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import urlsplit

from pydantic import ValidationError

from discovery.catalog import provider_for_url
from discovery.urls import is_http_url
from pathway.logger import get_logger
from pathway.models import CandidateResource

logger = get_logger(__name__)

RESOURCE_TYPES = {"course", "article", "practice", "certification"}
TITLE_FILLER_WORDS = {
    "course", "courses", "training", "certification", "fundamentals",
    "introduction", "advanced", "complete", "guide", "to", "for", "the", "and", "of",
}

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_NUMBERED_RE = re.compile(r"^\d+[.)]\s*")
_URL_RE = re.compile(r"https?://[^\s)\]>\"']+")
_MD_LINK_RE = re.compile(r"\[([^\]]+)\]\((https?://[^\s)]+)\)")


def parse_search_response(response: Union[str, List[Any], None]) -> List[CandidateResource]:
    if response is None:
        return []
    if isinstance(response, list):
        items = response
    else:
        items = extract_json_array(str(response))
        if items is None:
            items = parse_structured_text(str(response))

    candidates = []
    for item in items:
        if not isinstance(item, Mapping):
            logger.info("Dropping non-object search result entry", extra={"entry_type": type(item).__name__})
            continue
        candidate = to_candidate(item)
        if candidate is not None:
            candidates.append(candidate)
    return candidates


def extract_json_array(text: str) -> Optional[List[Any]]:
    """
    Returns the first JSON array of objects found in the text, or None. Prose
    before or after the array and markdown fences are ignored.
    """
    cleaned = _FENCE_RE.sub("", text)
    decoder = json.JSONDecoder()
    start = cleaned.find("[")
    while start != -1:
        try:
            data, _ = decoder.raw_decode(cleaned, start)
        except json.JSONDecodeError:
            data = None
        if isinstance(data, list) and any(isinstance(item, Mapping) for item in data):
            return data
        start = cleaned.find("[", start + 1)
    return None


def parse_structured_text(text: str) -> List[Dict[str, str]]:
    results: List[Dict[str, str]] = []
    current: Dict[str, str] = {}

    def flush():
        if current.get("title") and current.get("url"):
            results.append(dict(current))

    for raw in text.splitlines():
        line = raw.strip().lstrip("-*").strip()
        if not line:
            continue

        if _NUMBERED_RE.match(line):
            flush()
            current = {}
            line = _NUMBERED_RE.sub("", line)
            link = _MD_LINK_RE.search(line)
            if link:
                current["title"] = link.group(1).strip()
                current["url"] = link.group(2)
            else:
                current["title"] = line.strip("* ").strip()
            continue

        key, _, value = line.partition(":")
        key = key.strip("* ").lower()
        value = value.strip()
        if key in ("url", "link"):
            url = _URL_RE.search(value)
            if url:
                current["url"] = url.group(0)
        elif key in ("provider", "duration", "description", "rating", "type"):
            current[key] = value
        elif key == "cost":
            current["cost"] = value.lower()
        elif "url" not in current:
            link = _MD_LINK_RE.search(line)
            if link:
                current["url"] = link.group(2)

    flush()
    return results


def title_keywords(title: str) -> str:
    words = re.findall(r"[A-Za-z0-9+#]+", title.lower())
    kept = [w for w in words if w not in TITLE_FILLER_WORDS]
    return " ".join(kept) or title.strip().lower()


def to_search_url(url: str, title: str) -> str:
    """
    Rewrites a deep link on a roster provider into that provider's search
    results page for the title keywords. Deep links produced by a language model
    are often invented; search pages always resolve.
    """
    provider = provider_for_url(url)
    if provider is None or not provider.search_url:
        return url
    path = urlsplit(url).path.lower()
    if "search" in path or "browse" in path:
        return url
    return provider.build_search_url(title_keywords(title)) or url


def _rating(value: Any) -> float:
    try:
        rating = float(str(value).split("/")[0].strip())
    except (TypeError, ValueError):
        return 4.0
    return min(max(rating, 0.0), 5.0)


def to_candidate(item: Mapping) -> Optional[CandidateResource]:
    title = str(item.get("title") or "").strip()
    url = str(item.get("url") or item.get("link") or "").strip()
    if not title or not is_http_url(url):
        logger.info("Dropping malformed search result", extra={"title": title, "url": url})
        return None

    url = to_search_url(url, title)
    provider = str(item.get("provider") or "").strip()
    if not provider:
        known = provider_for_url(url)
        provider = known.name if known else "Online Platform"

    resource_type = str(item.get("type") or item.get("resource_type") or "course").strip().lower()

    try:
        return CandidateResource(
            title=title,
            url=url,
            provider=provider,
            cost="free" if "free" in str(item.get("cost") or "").lower() else "paid",
            rating=_rating(item.get("rating", 4.0)),
            description=str(item.get("description") or ""),
            resource_type=resource_type if resource_type in RESOURCE_TYPES else "course",
            duration=str(item.get("duration") or "varies"),
        )
    except ValidationError as e:
        logger.info(f"Dropping invalid search result: {e}")
        return None
