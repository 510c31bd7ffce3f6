from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class RevenueRecord:
    """Revenue of one customer for one calendar year (UTC). Derived, never stored."""

    customer_id: int
    year: int
    total_revenue: Decimal
