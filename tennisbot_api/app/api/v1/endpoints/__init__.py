"""
Endpoint subpackage for API v1.

Each module defines an ``APIRouter`` for one area of the storefront
(orders, customers, contact, admin, health).  The routers are
aggregated in ``router.py`` and then included in the main application.
"""
