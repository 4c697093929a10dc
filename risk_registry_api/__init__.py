"""
Risk Registry API.

An HTTP service that records risks (a state, a title and a
description) and serves them back by identifier.  Records are held in
memory only.  The service itself lives in ``risk_registry_api.app``;
this package exports nothing.
"""

__all__ = []
