# lachow_leads/search.py
from __future__ import annotations

import logging
import re
import time
from typing import Any, Iterable, Optional

import requests

from . import config
from .cache import load_cached_payload, search_cache_key, store_payload
from .dedupe import deduplicate_leads
from .leads import candidates_to_leads
from .types import BatchScrapeResult, Candidate, LeadCategory, ScrapeResult, SearchQuery

logger = logging.getLogger(__name__)

SERPAPI_BASE_URL = "https://serpapi.com/search.json"
PROFILE_PATH_MARKER = "linkedin.com/in/"


class SearchError(Exception):
    """Search API call failed; the message is shown to the user as-is."""


# ----------------------------
# Utilities
# ----------------------------
def validate_api_key(api_key: str) -> bool:
    # SerpAPI keys are 64 character hex strings
    return bool(re.fullmatch(r"[a-f0-9]{64}", (api_key or "").strip(), flags=re.I))


def _failure(query: str, error: str) -> ScrapeResult:
    logger.warning(f"Search failed for {query!r}: {error}")
    return ScrapeResult(success=False, query=query, error=error)


# ----------------------------
# SerpAPI (Google engine)
# ----------------------------
def fetch_serpapi(
    api_key: str,
    query: str,
    num_results: int = config.RESULTS_PER_QUERY,
    timeout_s: int = config.REQUEST_TIMEOUT_S,
    cache_dir: Optional[str] = None,
    max_age_s: Optional[float] = None,
) -> dict[str, Any]:
    """
    Run one Google search through SerpAPI and return the JSON payload.
    Raises SearchError for auth, rate limit, HTTP, payload and network errors.
    """
    num = min(int(num_results), config.MAX_RESULTS_PER_QUERY)

    key = search_cache_key(query, num)
    if cache_dir:
        cached = load_cached_payload(cache_dir, key, max_age_s=max_age_s)
        if cached is not None:
            logger.debug(f"Cache hit for {query!r}")
            return cached

    params = {
        "api_key": api_key.strip(),
        "engine": "google",
        "q": query,
        "num": str(num),
        "gl": "us",
        "hl": "en",
    }
    try:
        r = requests.get(
            SERPAPI_BASE_URL,
            params=params,
            headers={"Accept": "application/json"},
            timeout=timeout_s,
        )
    except requests.RequestException as e:
        raise SearchError(f"Network error: {e}") from e

    if r.status_code == 401:
        raise SearchError("Invalid API key. Please check your SerpAPI key.")
    if r.status_code == 429:
        raise SearchError("Rate limit exceeded. Please wait and try again.")
    if r.status_code >= 400:
        raise SearchError(f"SerpAPI error ({r.status_code}): {r.text}")

    try:
        data = r.json()
    except ValueError as e:
        raise SearchError(f"SerpAPI returned invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise SearchError("SerpAPI returned an unexpected payload.")
    if data.get("error"):
        raise SearchError(f"SerpAPI error: {data['error']}")

    if cache_dir:
        store_payload(cache_dir, key, data)
    return data


def filter_profile_results(organic_results: Iterable[dict[str, Any]]) -> list[Candidate]:
    """Keep LinkedIn profile links only; positions are renumbered from 0."""
    candidates: list[Candidate] = []
    for r in organic_results or []:
        link = str(r.get("link") or "")
        if PROFILE_PATH_MARKER not in link:
            continue
        candidates.append(
            Candidate(
                title=str(r.get("title") or ""),
                snippet=str(r.get("snippet") or ""),
                link=link,
                position=len(candidates),
            )
        )
    return candidates


# ----------------------------
# Public API
# ----------------------------
def scrape_linkedin_leads(
    api_key: str,
    query: str,
    query_label: str,
    query_category: LeadCategory,
    num_results: int = config.RESULTS_PER_QUERY,
    cache_dir: Optional[str] = None,
) -> ScrapeResult:
    """Search one query and turn the LinkedIn profile hits into leads. Never raises."""
    if not api_key or not api_key.strip():
        return _failure(query, "API key is required")
    if not validate_api_key(api_key):
        return _failure(query, "Invalid API key format. SerpAPI keys are 64 character hex strings.")
    if not query or not query.strip():
        return _failure(query, "Search query is required")

    try:
        data = fetch_serpapi(api_key, query, num_results=num_results, cache_dir=cache_dir)
    except SearchError as e:
        return _failure(query, str(e))

    candidates = filter_profile_results(data.get("organic_results") or [])
    leads = candidates_to_leads(candidates, query_category, query_label)
    logger.info(f"{query_label}: {len(leads)} profiles")

    return ScrapeResult(success=True, query=query, leads=leads, total_results=len(candidates))


def batch_scrape_leads(
    api_key: str,
    queries: Iterable[SearchQuery],
    num_results_per_query: int = config.RESULTS_PER_QUERY,
    delay_s: float = config.REQUEST_DELAY_S,
    cache_dir: Optional[str] = None,
) -> BatchScrapeResult:
    """
    Run queries one at a time with a pause between requests, then merge
    everything through the deduplicator.
    """
    all_leads = []
    errors: list[str] = []
    total = 0

    for i, q in enumerate(queries):
        if i > 0 and delay_s > 0:
            # politeness delay for the API rate limit
            time.sleep(delay_s)

        result = scrape_linkedin_leads(
            api_key,
            q.query,
            q.label,
            q.category,
            num_results=num_results_per_query,
            cache_dir=cache_dir,
        )
        if result.success:
            all_leads.extend(result.leads)
            total += result.total_results
        elif result.error:
            errors.append(f"{q.label}: {result.error}")

    unique = deduplicate_leads(all_leads)
    logger.info(f"Batch done: {len(unique)} unique leads from {total} results, {len(errors)} errors")

    return BatchScrapeResult(success=not errors, leads=unique, errors=errors, total_results=total)
