"""
Facade of the webmate TestMgmt subsystem
"""

from typing import List, Optional

import requests

from webmate.api.base_client import WebmateApiClient
from webmate.api.result import OptionalResult
from webmate.api.session import WebmateAPISession
from webmate.api.testmgmt_api import TestMgmtApiClient
from webmate.models.ids import ProjectId, TestId, TestRunId, TestSessionId
from webmate.models.testmgmt import (
    Test,
    TestExecutionSpec,
    TestExecutionSpecBuilder,
    TestInfo,
    TestResult,
    TestRunFinishData
)
from webmate.models.types import TestRunEvaluationStatus


class TestMgmtClient:
    """
    Facade of the TestMgmt subsystem

    Example:
        >>> session = WebmateAPISession.from_env()
        >>> testmgmt = TestMgmtClient(session)
        >>> test = testmgmt.get_test(test_id)
        >>> if test.is_present():
        ...     print(test.get().name)
    """

    def __init__(self, session: WebmateAPISession, http_session: Optional[requests.Session] = None):
        """
        Create a TestMgmtClient for a session

        Args:
            session: The WebmateAPISession used by the client
            http_session: Optional preconfigured requests.Session used for the connection
        """
        self.session = session
        self.api_client = TestMgmtApiClient(
            WebmateApiClient(session.auth_info, session.environment, http_session)
        )

    def get_tests_in_project(self, project_id: ProjectId) -> OptionalResult[List[TestInfo]]:
        """Retrieve the Tests in a project. ABSENT if there is no such project"""
        return self.api_client.get_tests_in_project(project_id)

    def get_test(self, test_id: TestId) -> OptionalResult[Test]:
        """Retrieve a Test. ABSENT if there is no such Test"""
        return self.api_client.get_test(test_id)

    def get_test_results(self, test_run_id: TestRunId) -> OptionalResult[List[TestResult]]:
        """
        Retrieve the TestResults of a TestRun

        Returns:
            Present list of TestResults, empty if the run has none yet. ABSENT if there is no such TestRun
        """
        return self.api_client.get_test_results(test_run_id)

    def start_execution_in_project(self, spec: TestExecutionSpec, project_id: ProjectId) -> TestRunId:
        """Create a TestExecution in the given project and start it"""
        execution_id = self.api_client.create_test_execution(project_id, spec)
        return self.api_client.start_test_execution(execution_id)

    def start_execution(self, spec_builder: TestExecutionSpecBuilder) -> 'TestRun':
        """
        Create and start a TestExecution in the session's current project

        Args:
            spec_builder: Builder providing the settings of the execution

        Returns:
            TestRun: Handle of the TestRun that was started

        Raises:
            WebmatePreconditionError: If the session has no current project
        """
        project_id = self.session.require_project_id("TestExecution")
        spec = spec_builder.build()
        return TestRun(self.start_execution_in_project(spec, project_id), self.session, self)

    def create_test_session(self, name: str) -> 'TestSession':
        """
        Create a new TestSession with the given name in the session's current project

        Raises:
            WebmatePreconditionError: If the session has no current project
        """
        project_id = self.session.require_project_id("TestSession")
        return TestSession(self.api_client.create_test_session(project_id, name), self.session)

    def finish_test_run(
        self,
        test_run_id: TestRunId,
        status: TestRunEvaluationStatus,
        msg: Optional[str] = None,
        detail: Optional[str] = None
    ) -> None:
        """
        Finish a running TestRun

        Args:
            test_run_id: TestRun to finish
            status: Final verdict
            msg: Optional short message, e.g. the reason of a failure
            detail: Optional detail information, e.g. a stack trace
        """
        self.api_client.finish_test_run(test_run_id, TestRunFinishData(status=status, msg=msg, detail=detail))


class TestRun:
    """Handle of a started TestRun"""

    def __init__(self, test_run_id: TestRunId, session: WebmateAPISession, client: TestMgmtClient):
        self.id = test_run_id
        self.session = session
        self.client = client

    def finish(self, status: TestRunEvaluationStatus, msg: Optional[str] = None, detail: Optional[str] = None) -> None:
        self.client.finish_test_run(self.id, status, msg, detail)

    def get_results(self) -> OptionalResult[List[TestResult]]:
        return self.client.get_test_results(self.id)

    def __repr__(self):
        return f"TestRun({self.id})"


class TestSession:
    """Handle of a TestSession"""

    def __init__(self, test_session_id: TestSessionId, session: WebmateAPISession):
        self.id = test_session_id
        self.session = session

    def __repr__(self):
        return f"TestSession({self.id})"
