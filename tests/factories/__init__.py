"""Test factories for creating test data."""

from tests.factories.sinks import RecordingLogger
from tests.factories.users import (
    UserV1,
    UserV2,
    UserV3,
    downgrade_v2_to_v1,
    downgrade_v3_to_v2,
    upgrade_v1_to_v2,
    upgrade_v2_to_v3,
)

__all__ = [
    "RecordingLogger",
    "UserV1",
    "UserV2",
    "UserV3",
    "downgrade_v2_to_v1",
    "downgrade_v3_to_v2",
    "upgrade_v1_to_v2",
    "upgrade_v2_to_v3",
]
