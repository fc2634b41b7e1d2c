# app/notesdb/events.py
"""Typed Lambda event payloads."""
from dataclasses import dataclass

from .errors import ValidationError


def _require_str(event, key):
    value = event.get(key)
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{key} must be a non-empty string", field=key)
    return value


@dataclass(frozen=True)
class DeploymentHook:
    """The payload CodeDeploy sends to pre/post traffic hooks. This is all you get."""

    deployment_id: str
    lifecycle_event_hook_execution_id: str

    @classmethod
    def from_event(cls, event):
        if not isinstance(event, dict):
            raise ValidationError("event must be a JSON object")
        return cls(
            deployment_id=_require_str(event, "DeploymentId"),
            lifecycle_event_hook_execution_id=_require_str(event, "LifecycleEventHookExecutionId"),
        )
