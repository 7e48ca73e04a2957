"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared
across users. State tracks the ids returned by creation endpoints so
follow-up requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class SellerState:
    """A simulated seller and the bakery they run."""

    principal_id: str | None = None
    bakery_id: str | None = None
    cake_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"X-Principal-Id": self.principal_id}


@dataclass
class CustomerState:
    """A simulated customer browsing and ordering."""

    principal_id: str | None = None
    cake_ids: list[str] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"X-Principal-Id": self.principal_id}


@dataclass
class OrderState:
    """One order walked through the status chain by its seller."""

    order_id: str | None = None
    current_status: str = "pending"
