"""
Retailer purchase links.

Responsibilities:
- Read the affiliate tracking tag from the environment.
- Turn a canonical product URL into Amazon, Newegg and eBay links.
- Degrade to the canonical URL alone when it cannot be parsed.
"""
