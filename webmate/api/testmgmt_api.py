"""
TestMgmt API Client
Remote operations of the webmate test management subsystem
"""

from typing import List

from webmate.api.base_client import WebmateApiClient
from webmate.api.exceptions import WebmateNoResponseError
from webmate.api.result import ABSENT, OptionalResult, Present
from webmate.api.uri_template import UriTemplate
from webmate.models.ids import ProjectId, TestExecutionId, TestId, TestRunId, TestSessionId
from webmate.models.testmgmt import (
    Test,
    TestExecutionSpec,
    TestInfo,
    TestResult,
    TestRunFinishData
)


class TestMgmtApiClient:
    """One method per endpoint of the TestMgmt subsystem"""

    GET_TESTS_IN_PROJECT = UriTemplate("/projects/${projectId}/testmgmt/tests")
    GET_TEST = UriTemplate("/testmgmt/tests/${testId}")
    GET_TEST_RESULTS = UriTemplate("/testmgmt/testruns/${testRunId}/results")
    CREATE_TEST_EXECUTION = UriTemplate("/projects/${projectId}/testexecutions")
    CREATE_TEST_SESSION = UriTemplate("/projects/${projectId}/testsessions")
    START_TEST_EXECUTION = UriTemplate("/testmgmt/testexecutions/${testExecutionId}")
    FINISH_TEST_RUN = UriTemplate("/testmgmt/testruns/${testRunId}/finish")

    def __init__(self, client: WebmateApiClient):
        self.client = client
        self.logger = client.logger

    def get_tests_in_project(self, project_id: ProjectId) -> OptionalResult[List[TestInfo]]:
        """
        Get the Tests of a project

        API Endpoint: GET /projects/{projectId}/testmgmt/tests

        Returns:
            Present list of TestInfo, or ABSENT if there is no such project or no data was returned
        """
        response = self.client.send_get(self.GET_TESTS_IN_PROJECT, {'projectId': str(project_id)})
        if not response.has_body():
            return ABSENT

        return Present(self.client.codec.decode_response(response.opt_http_response.get(), List[TestInfo], 'TestInfo data'))

    def get_test(self, test_id: TestId) -> OptionalResult[Test]:
        """
        Get a Test

        API Endpoint: GET /testmgmt/tests/{testId}

        Returns:
            Present Test, or ABSENT if there is no such Test or no data was returned
        """
        response = self.client.send_get(self.GET_TEST, {'testId': str(test_id)})
        if not response.has_body():
            return ABSENT

        return Present(self.client.codec.decode_response(response.opt_http_response.get(), Test, 'Test data'))

    def get_test_results(self, test_run_id: TestRunId) -> OptionalResult[List[TestResult]]:
        """
        Get the TestResults of a TestRun

        API Endpoint: GET /testmgmt/testruns/{testRunId}/results

        Returns:
            Present list of TestResults, or ABSENT if there is no such TestRun or no data was returned.
            A TestRun without results yields a present empty list.
        """
        response = self.client.send_get(self.GET_TEST_RESULTS, {'testRunId': str(test_run_id)})
        if not response.has_body():
            return ABSENT

        return Present(self.client.codec.decode_value(response.opt_http_response.get(), List[TestResult], 'TestResult data'))

    def create_test_execution(self, project_id: ProjectId, spec: TestExecutionSpec) -> TestExecutionId:
        """
        Create a TestExecution in a project

        API Endpoint: POST /projects/{projectId}/testexecutions

        Raises:
            WebmateNoResponseError: If the server returned no body
        """
        self.logger.info(f"Creating TestExecution '{spec.name}' in project {project_id}")
        response = self.client.send_post(self.CREATE_TEST_EXECUTION, {'projectId': str(project_id)}, spec)
        if not response.has_body():
            raise WebmateNoResponseError("Could not create TestExecution. Got no response")

        return self.client.codec.decode_response(response.opt_http_response.get(), TestExecutionId, 'TestExecutionId')

    def create_test_session(self, project_id: ProjectId, name: str) -> TestSessionId:
        """
        Create a TestSession in a project

        API Endpoint: POST /projects/{projectId}/testsessions

        Raises:
            WebmateNoResponseError: If the server returned no body
        """
        self.logger.info(f"Creating TestSession '{name}' in project {project_id}")
        response = self.client.send_post(self.CREATE_TEST_SESSION, {'projectId': str(project_id)}, {'name': name})
        if not response.has_body():
            raise WebmateNoResponseError("Could not create TestSession. Got no response")

        return self.client.codec.decode_response(response.opt_http_response.get(), TestSessionId, 'TestSessionId')

    def start_test_execution(self, test_execution_id: TestExecutionId) -> TestRunId:
        """
        Start a TestExecution

        API Endpoint: POST /testmgmt/testexecutions/{testExecutionId}

        Returns:
            TestRunId: Id of the TestRun the server created for this start

        Raises:
            WebmateNoResponseError: If the server returned no body
        """
        self.logger.info(f"Starting TestExecution {test_execution_id}")
        response = self.client.send_post(self.START_TEST_EXECUTION, {'testExecutionId': str(test_execution_id)})
        if not response.has_body():
            raise WebmateNoResponseError("Could not start TestExecution. Got no response")

        return self.client.codec.decode_response(response.opt_http_response.get(), TestRunId, 'TestRunId')

    def finish_test_run(self, test_run_id: TestRunId, data: TestRunFinishData) -> None:
        """
        Finish a TestRun

        API Endpoint: POST /testmgmt/testruns/{testRunId}/finish

        Raises:
            WebmateNoResponseError: If the server reported that there is no such TestRun
        """
        self.logger.info(f"Finishing TestRun {test_run_id} with status {data.status.value}")
        response = self.client.send_post(self.FINISH_TEST_RUN, {'testRunId': str(test_run_id)}, data)
        if not response.is_present():
            raise WebmateNoResponseError("Could not finish TestRun. Got no response")
