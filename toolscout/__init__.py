"""
Toolscout - relevance scoring and click aggregation for an AI-tools directory.

Subpackages
-----------
quiz     : questionnaire → ranked tool recommendations.
related  : related-post relevance ranking for blog articles.
clicks   : windowed affiliate-click aggregation for dashboards.
creation : request-scoped context for multi-step tool creation.
"""

__version__ = "0.1.0"
