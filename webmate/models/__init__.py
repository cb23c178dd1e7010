"""
Models package
Pydantic models for webmate identifiers and API payloads
"""

from webmate.models.ids import (
    WebmateId,
    ProjectId,
    TestId,
    TestRunId,
    TestExecutionId,
    TestSessionId,
    ArtifactId,
    BrowserSessionId,
    DeviceId,
    ImageId,
    PackageId
)
from webmate.models.types import ArtifactType, TestRunEvaluationStatus
from webmate.models.testmgmt import (
    TestInfo,
    Test,
    TestResult,
    TestRunFinishData,
    SingleTestRunCreationSpec,
    TestExecutionSpec,
    TestExecutionSpecBuilder
)
from webmate.models.artifacts import ArtifactInfo, Artifact

__all__ = [
    'WebmateId',
    'ProjectId',
    'TestId',
    'TestRunId',
    'TestExecutionId',
    'TestSessionId',
    'ArtifactId',
    'BrowserSessionId',
    'DeviceId',
    'ImageId',
    'PackageId',
    'ArtifactType',
    'TestRunEvaluationStatus',
    'TestInfo',
    'Test',
    'TestResult',
    'TestRunFinishData',
    'SingleTestRunCreationSpec',
    'TestExecutionSpec',
    'TestExecutionSpecBuilder',
    'ArtifactInfo',
    'Artifact',
]
