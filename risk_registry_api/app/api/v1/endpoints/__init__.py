"""
Route handlers for API v1.

``risks`` holds the create, list and lookup handlers for risks.
"""
