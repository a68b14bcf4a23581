from ..core.exceptions import InvalidConfigurationError
from ..models import Resources


def validate_resources(resources: Resources) -> None:
    """Reject non-positive cpu, ram or disk allocations."""
    if resources.cpu is not None and resources.cpu <= 0:
        raise InvalidConfigurationError(
            "The cpu allocation for the function must be positive", field="resources.cpu"
        )
    if resources.ram is not None and resources.ram <= 0:
        raise InvalidConfigurationError(
            "The ram allocation for the function must be positive", field="resources.ram"
        )
    if resources.disk is not None and resources.disk <= 0:
        raise InvalidConfigurationError(
            "The disk allocation for the function must be positive", field="resources.disk"
        )
