from __future__ import annotations

from collections.abc import Iterable

from playpub.publish.model import ApplicationGroup, Artifact

__all__ = ["group_artifacts"]


def group_artifacts(artifacts: Iterable[Artifact]) -> dict[str, ApplicationGroup]:
    """Partition artifacts by exact application id.

    Keys keep first-seen order; each group keeps its artifacts in input order.
    """
    groups: dict[str, ApplicationGroup] = {}
    for artifact in artifacts:
        group = groups.get(artifact.application_id)
        if group is None:
            group = ApplicationGroup(application_id=artifact.application_id)
            groups[artifact.application_id] = group
        group.artifacts.append(artifact)
    return groups
