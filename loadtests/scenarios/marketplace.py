"""Mixed marketplace workload.

Weights model a storefront where browsing and ordering dominate and
sellers occasionally set up menus and work their order queue.
"""

from locust import HttpUser, between

from loadtests.scenarios.customer import BrowseAndOrderJourney
from loadtests.scenarios.seller import BakerySetupJourney, OrderFulfillmentJourney


class MarketplaceUser(HttpUser):
    wait_time = between(0.5, 2.0)
    tasks = {
        BrowseAndOrderJourney: 6,
        OrderFulfillmentJourney: 3,
        BakerySetupJourney: 1,
    }


class CustomerSurgeUser(HttpUser):
    """Browsing spike, e.g. a holiday weekend."""

    wait_time = between(0.1, 0.5)
    tasks = [BrowseAndOrderJourney]
