"""
Shared Types
Enums used by several webmate subsystems
"""

from enum import Enum


class TestRunEvaluationStatus(Enum):
    """Final verdict of a TestRun"""
    PASSED = "PASSED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class ArtifactType(Enum):
    """Known artifact types. The value is the type name used by the API"""
    SCREENSHOT = "SCREENSHOT"
    FULLPAGE_SCREENSHOT = "FULLPAGE_SCREENSHOT"
    LOG = "LOG"
    BROWSER_LOG = "BROWSER_LOG"
    HAR = "HAR"
    VIDEO = "VIDEO"
    DOM_SNAPSHOT = "DOM_SNAPSHOT"
    JS_EXCEPTION = "JS_EXCEPTION"
    TEST_RESULT = "TEST_RESULT"

    @property
    def type_name(self) -> str:
        return self.value

    @classmethod
    def from_type_name(cls, type_name: str):
        """
        Look up an artifact type by its API type name

        Returns:
            ArtifactType or None if the type name is unknown to this SDK
        """
        for artifact_type in cls:
            if artifact_type.value == type_name:
                return artifact_type
        return None
