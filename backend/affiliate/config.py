from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class AffiliateConfig:
    tag: str = os.getenv("AFFILIATE_TAG", "")
    amazon_search_url: str = "https://www.amazon.com/s"
    newegg_search_url: str = "https://www.newegg.com/p/pl"
    ebay_search_url: str = "https://www.ebay.com/sch/i.html"


DEFAULT_AFFILIATE_CONFIG = AffiliateConfig()
