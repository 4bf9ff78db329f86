"""
Affiliate click aggregation for the admin dashboards.

Modules
-------
windows    : ClickRange selector + window boundary helpers.
aggregator : per-tool buckets, dashboard summary, global counts, top tools.
"""
