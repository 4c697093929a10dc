"""
First version of the risk API: ``POST /v1/risks``, ``GET /v1/risks``
and ``GET /v1/risks/{id}``.
"""
