"""Artifact resolution and upload orchestration.

Data flows one way through the modules of this package:
- matcher: find artifact and expansion files by pattern
- inspector: read application id and version code from each package
- grouper: partition artifacts per application id
- expansion: attach main/patch expansion files to version codes
- validation: check track and rollout before any discovery
- orchestrator: run the above and upload once per application group
"""

from __future__ import annotations
