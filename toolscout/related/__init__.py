"""
Related-content ranking for blog articles.

Modules
-------
ranker : score_candidate() + rank() - pure functions.
"""
