"""Ledger of ad-hoc services used during hiring.

A service is either done in-house (priced at the employee's employer hourly
rate) or bought from a vendor. Services flagged ``repeat_on_bad_hire`` are
summed separately because they must be paid again if the hire fails.
"""

import logging
from typing import Iterable

from src.cost_engine.models import (
    BillingType,
    CostConfig,
    InhouseDetails,
    OutsourcedDetails,
    ServiceEntry,
    ServicesCost,
)
from src.cost_engine.pay import employer_hourly_rate

logger = logging.getLogger(__name__)


def compute_service_cost(entry: ServiceEntry, config: CostConfig) -> float:
    """Price of a single service entry."""
    details = entry.details
    hours = max(0.0, entry.service_hours)

    if isinstance(details, InhouseDetails):
        return employer_hourly_rate(details.pay, config) * hours

    if isinstance(details, OutsourcedDetails):
        if details.billing_type == BillingType.HOURLY:
            return details.price * hours
        # One-off and monthly invoices cover the whole service period
        return details.price

    raise TypeError(f"Unsupported service details: {type(details).__name__}")


def compute_services_cost(
    entries: Iterable[ServiceEntry], config: CostConfig
) -> ServicesCost:
    """Total of all services and of those repeated on a bad hire."""
    total = 0.0
    repeated = 0.0
    count = 0

    for entry in entries:
        cost = compute_service_cost(entry, config)
        total += cost
        if entry.repeat_on_bad_hire:
            repeated += cost
        count += 1

    logger.debug(
        "Priced %d services: total=%.2f repeated=%.2f", count, total, repeated
    )
    return ServicesCost(total_services_cost=total, repeated_services_cost=repeated)
