"""ORM Models — SQLAlchemy declarative models backing SqlRouteStore.

Invariants:
    - All models inherit from Base (db/base.py)
    - Rows map to core records at the store boundary; core never sees ORM objects
"""

from route_registry.models.route import RouteRow, RouteUpdateRow  # noqa: F401
