from __future__ import annotations

from .models import GraphPayload, FindingItem, ValidationResponse, ParallelGroupsResponse, DepthResponse
from .builders import build_validation_response, payload_to_graphdef

__all__ = [
    'GraphPayload', 'FindingItem', 'ValidationResponse', 'ParallelGroupsResponse', 'DepthResponse',
    'build_validation_response', 'payload_to_graphdef'
]
