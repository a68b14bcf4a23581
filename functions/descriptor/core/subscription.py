"""
Subscription mode derivation.

The descriptor only records a subscription type; a function config records
retain-ordering and the processing guarantee instead. FAILOVER is required
whenever messages must be processed in order, which effectively-once
processing also implies.
"""

from typing import Optional, Tuple

from ..models import ProcessingGuarantees, SubscriptionType


def derive_subscription_type(
    retain_ordering: bool, processing_guarantees: Optional[ProcessingGuarantees]
) -> SubscriptionType:
    if retain_ordering or processing_guarantees == ProcessingGuarantees.EFFECTIVELY_ONCE:
        return SubscriptionType.FAILOVER
    return SubscriptionType.SHARED


def reconstruct_delivery(
    subscription_type: SubscriptionType,
) -> Tuple[bool, ProcessingGuarantees]:
    """
    Map a subscription type back to (retain_ordering, processing_guarantees).

    Lossy: SHARED always comes back as AT_LEAST_ONCE, so an original
    AT_MOST_ONCE guarantee cannot be recovered.
    """
    if subscription_type == SubscriptionType.FAILOVER:
        return True, ProcessingGuarantees.EFFECTIVELY_ONCE
    return False, ProcessingGuarantees.AT_LEAST_ONCE
