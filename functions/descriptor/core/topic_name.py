"""
Where: functions/descriptor/core/topic_name.py
What: Parse and validate topic names referenced by a function config.
Why: Topic grammar checks are shared by input, output, log and dead-letter topics.
"""

import re
from dataclasses import dataclass

PUBLIC_TENANT = "public"
DEFAULT_NAMESPACE = "default"

_DOMAINS = ("persistent", "non-persistent")
_DOMAIN_SEPARATOR = "://"
_NAMED_ENTITY_PATTERN = re.compile(r"^[-=:.\w]*$")


@dataclass(frozen=True)
class TopicName:
    original: str
    domain: str
    tenant: str
    namespace: str
    local_name: str
    cluster: str | None = None

    @property
    def full_name(self) -> str:
        if self.cluster:
            return (
                f"{self.domain}://{self.tenant}/{self.cluster}/{self.namespace}/{self.local_name}"
            )
        return f"{self.domain}://{self.tenant}/{self.namespace}/{self.local_name}"


def parse_topic_name(topic: str) -> TopicName:
    """
    Parse a topic name into its parts.

    Supported inputs:
    - short name (`my-topic`), resolved to `persistent://public/default/my-topic`
    - tenant-qualified name (`tenant/namespace/my-topic`)
    - full name (`persistent://tenant/namespace/my-topic`)
    - legacy full name with cluster (`persistent://tenant/cluster/namespace/my-topic`)
    """
    if topic is None or not topic.strip():
        raise ValueError("Topic name is required")

    if _DOMAIN_SEPARATOR not in topic:
        parts = topic.split("/")
        if len(parts) == 1:
            return _build(topic, "persistent", PUBLIC_TENANT, None, DEFAULT_NAMESPACE, parts[0])
        if len(parts) == 3:
            return _build(topic, "persistent", parts[0], None, parts[1], parts[2])
        raise ValueError(f"Invalid short topic name '{topic}'")

    domain, rest = topic.split(_DOMAIN_SEPARATOR, 1)
    if domain not in _DOMAINS:
        raise ValueError(f"Invalid topic domain '{domain}'")

    parts = rest.split("/", 3)
    if len(parts) == 3:
        return _build(topic, domain, parts[0], None, parts[1], parts[2])
    if len(parts) == 4:
        return _build(topic, domain, parts[0], parts[1], parts[2], parts[3])
    raise ValueError(f"Invalid topic name '{topic}'")


def is_valid_topic_name(topic: str) -> bool:
    try:
        parse_topic_name(topic)
    except ValueError:
        return False
    return True


def _build(
    original: str,
    domain: str,
    tenant: str,
    cluster: str | None,
    namespace: str,
    local_name: str,
) -> TopicName:
    for kind, value in (("tenant", tenant), ("cluster", cluster), ("namespace", namespace)):
        if value is None:
            continue
        if not value or not _NAMED_ENTITY_PATTERN.match(value):
            raise ValueError(f"Invalid {kind} name '{value}' in topic '{original}'")
    if not local_name:
        raise ValueError(f"Topic name '{original}' has an empty local name")
    return TopicName(
        original=original,
        domain=domain,
        tenant=tenant,
        namespace=namespace,
        local_name=local_name,
        cluster=cluster,
    )
