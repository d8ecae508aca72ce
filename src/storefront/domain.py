"""Storefront domain: catalogue, cart, wishlist, orders and accounts.

Every aggregate, command, handler and repository in this package registers
itself against the ``storefront`` domain below. ``storefront.init()`` walks
the package and imports them.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
