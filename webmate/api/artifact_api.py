"""
Artifact API Client
Queries artifacts (screenshots, logs, ...) recorded by webmate
"""

from typing import Iterable, List

from webmate.api.base_client import WebmateApiClient
from webmate.api.result import ABSENT, OptionalResult, Present
from webmate.api.uri_template import UriTemplate
from webmate.models.artifacts import Artifact, ArtifactInfo
from webmate.models.ids import ArtifactId, ProjectId, TestRunId
from webmate.models.types import ArtifactType


class ArtifactApiClient:
    """One method per endpoint of the Artifact subsystem"""

    QUERY_ARTIFACTS = UriTemplate("/projects/${projectId}/artifacts")
    GET_ARTIFACT = UriTemplate("/artifact/artifacts/${artifactId}")

    def __init__(self, client: WebmateApiClient):
        self.client = client

    def query_artifacts(
        self,
        project_id: ProjectId,
        test_run_id: TestRunId,
        artifact_types: Iterable[ArtifactType] = ()
    ) -> OptionalResult[List[ArtifactInfo]]:
        """
        Get the artifacts of a TestRun

        API Endpoint: GET /projects/{projectId}/artifacts?testRunId=...&types=...

        Args:
            project_id: Project the TestRun belongs to
            test_run_id: TestRun the artifacts are associated with
            artifact_types: Only return artifacts of these types. No filter if empty

        Returns:
            Present list of ArtifactInfo, or ABSENT if there is no such project or no data was returned
        """
        params = [('testRunId', str(test_run_id))]

        type_names = [artifact_type.type_name for artifact_type in artifact_types]
        if type_names:
            params.append(('types', ','.join(type_names)))

        response = self.client.send_get(self.QUERY_ARTIFACTS, {'projectId': str(project_id)}, params)
        if not response.has_body():
            return ABSENT

        return Present(self.client.codec.decode_response(response.opt_http_response.get(), List[ArtifactInfo], 'ArtifactInfo data'))

    def get_artifact(self, artifact_id: ArtifactId) -> OptionalResult[Artifact]:
        """
        Get an Artifact including its data

        API Endpoint: GET /artifact/artifacts/{artifactId}

        Returns:
            Present Artifact, or ABSENT if there is no such Artifact or no data was returned
        """
        response = self.client.send_get(self.GET_ARTIFACT, {'artifactId': str(artifact_id)})
        if not response.has_body():
            return ABSENT

        return Present(self.client.codec.decode_response(response.opt_http_response.get(), Artifact, 'Artifact data'))
