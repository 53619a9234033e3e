from __future__ import annotations

import logging
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from ..recommendations.models import AffiliateUrls
from .config import DEFAULT_AFFILIATE_CONFIG, AffiliateConfig

logger = logging.getLogger(__name__)

# field, host marker, tracking param, AffiliateConfig search base attribute, search query param
_RETAILERS: tuple[tuple[str, str, str, str, str], ...] = (
    ("amazon", "amazon.", "tag", "amazon_search_url", "k"),
    ("newegg", "newegg.", "clickTrack", "newegg_search_url", "d"),
    ("ebay", "ebay.", "campid", "ebay_search_url", "_nkw"),
)


def _set_param(url: str, key: str, value: str) -> str:
    """Return ``url`` with query parameter ``key`` set to ``value``, replacing any existing one."""
    parts = urlsplit(url)
    query = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != key]
    query.append((key, value))
    return urlunsplit(parts._replace(query=urlencode(query)))


def _search_url(base: str, query_param: str, product_url: str) -> str:
    return f"{base}?{urlencode({query_param: product_url})}"


def build_affiliate_urls(
    product_url: str,
    config: AffiliateConfig = DEFAULT_AFFILIATE_CONFIG,
) -> AffiliateUrls:
    """
    Build purchase links for each supported retailer.

    A product already hosted on a retailer keeps its URL, plus the tracking
    parameter when a tag is configured. Other retailers get a search URL
    with the product URL as the query. A URL that cannot be parsed yields
    canonical-only links.
    """
    try:
        parts = urlsplit(product_url)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"not an absolute URL: {product_url!r}")
        host = (parts.hostname or "").lower()
    except ValueError:
        logger.warning("Malformed product URL, returning canonical link only", exc_info=True)
        return AffiliateUrls(canonical=product_url)

    links: dict[str, str] = {}
    for retailer, marker, tracking_param, base_attr, query_param in _RETAILERS:
        if marker in host:
            url = product_url
        else:
            url = _search_url(getattr(config, base_attr), query_param, product_url)
        if config.tag:
            url = _set_param(url, tracking_param, config.tag)
        links[retailer] = url

    return AffiliateUrls(canonical=product_url, **links)
