"""
Test Management Models
Pydantic models for the webmate TestMgmt subsystem
"""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from webmate.models.ids import TestId, TestRunId
from webmate.models.types import TestRunEvaluationStatus


class TestInfo(BaseModel):
    """Summary of a Test as listed for a project"""
    model_config = ConfigDict(frozen=True)

    id: TestId
    name: str
    creationTime: datetime
    description: Optional[str] = None
    version: int


class Test(BaseModel):
    """Full Test document"""
    model_config = ConfigDict(frozen=True)

    id: TestId
    name: str
    description: Optional[str] = None
    creationTime: Optional[datetime] = None
    version: int = 0
    parameters: List[Dict[str, Any]] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    def get_info(self) -> TestInfo:
        """
        Condense the Test into the TestInfo shape used by project listings

        Raises:
            ValueError: If the Test has no creation time
        """
        if self.creationTime is None:
            raise ValueError(f"Test {self.id} has no creation time")
        return TestInfo(
            id=self.id,
            name=self.name,
            creationTime=self.creationTime,
            description=self.description,
            version=self.version
        )


class TestResult(BaseModel):
    """Single result reported for a TestRun"""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    testRunId: Optional[TestRunId] = None
    status: str
    message: Optional[str] = None
    detail: Optional[str] = None
    creationTime: Optional[datetime] = None

    def is_passed(self) -> bool:
        return self.status.upper() == TestRunEvaluationStatus.PASSED.value


class TestRunFinishData(BaseModel):
    """Payload that finishes a TestRun. Unset fields are left out of the request"""
    model_config = ConfigDict(frozen=True)

    status: TestRunEvaluationStatus
    msg: Optional[str] = None
    detail: Optional[str] = None


class SingleTestRunCreationSpec(BaseModel):
    """
    Describes how the TestRun of a TestExecution is created

    Args:
        assignmentSpec: Values for the parameters of the Test, keyed by parameter name
    """
    model_config = ConfigDict(frozen=True)

    type: Literal['SingleTestRunCreationSpec'] = 'SingleTestRunCreationSpec'
    assignmentSpec: Dict[str, Any] = Field(default_factory=dict)


class TestExecutionSpec(BaseModel):
    """Request body for creating a TestExecution"""
    model_config = ConfigDict(frozen=True)

    executionType: str
    name: str
    associatedTest: Optional[TestId] = None
    testRunCreationSpec: SingleTestRunCreationSpec = Field(default_factory=SingleTestRunCreationSpec)
    tags: List[str] = Field(default_factory=list)


class TestExecutionSpecBuilder:
    """
    Collects the settings of a TestExecution and builds its TestExecutionSpec

    Example:
        >>> builder = (TestExecutionSpecBuilder("Nightly regression")
        ...            .for_test(test_id)
        ...            .with_parameter_assignments({"browser": "chrome"})
        ...            .with_tags("nightly"))
        >>> test_run = testmgmt_client.start_execution(builder)
    """

    DEFAULT_EXECUTION_TYPE = "Story"

    def __init__(self, name: str, execution_type: Optional[str] = None):
        self.name = name
        self.execution_type = execution_type or self.DEFAULT_EXECUTION_TYPE
        self.test_id: Optional[TestId] = None
        self.parameter_assignments: Dict[str, Any] = {}
        self.tags: List[str] = []

    def for_test(self, test_id: TestId) -> 'TestExecutionSpecBuilder':
        self.test_id = test_id
        return self

    def with_parameter_assignments(self, assignments: Dict[str, Any]) -> 'TestExecutionSpecBuilder':
        self.parameter_assignments.update(assignments)
        return self

    def with_tags(self, *tags: str) -> 'TestExecutionSpecBuilder':
        self.tags.extend(tags)
        return self

    def build(self) -> TestExecutionSpec:
        return TestExecutionSpec(
            executionType=self.execution_type,
            name=self.name,
            associatedTest=self.test_id,
            testRunCreationSpec=SingleTestRunCreationSpec(assignmentSpec=dict(self.parameter_assignments)),
            tags=list(self.tags)
        )
