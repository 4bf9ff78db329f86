"""
Quiz matcher: turns a completed questionnaire into up to three ranked tool
recommendations.

Modules
-------
rules        : keyword tables and point values - pure data.
matcher      : score_tool() + build_reason() + match() - pure functions.
subscription : best-effort submission of answers to the mailing-list endpoint.
"""
