"""
Prometheus metrics for the authorization layer. Exposed through the /metrics ASGI app.
"""

from prometheus_client import Counter

AUTHORIZATION_DECISIONS = Counter(
    "inventory_authorization_decisions",
    "Ownership decisions taken by the guard",
    ["resource", "decision"],
)

AUTHENTICATION_FAILURES = Counter(
    "inventory_authentication_failures",
    "Rejected bearer credentials",
    ["reason"],
)
