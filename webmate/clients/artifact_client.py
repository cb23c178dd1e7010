"""
Facade of the webmate Artifact subsystem
"""

from typing import Iterable, List, Optional

import requests

from webmate.api.artifact_api import ArtifactApiClient
from webmate.api.base_client import WebmateApiClient
from webmate.api.exceptions import WebmateApiClientException
from webmate.api.result import OptionalResult
from webmate.api.session import WebmateAPISession
from webmate.models.artifacts import Artifact, ArtifactInfo
from webmate.models.ids import ArtifactId, ProjectId, TestRunId
from webmate.models.types import ArtifactType


class ArtifactClient:
    """Facade of the Artifact subsystem"""

    def __init__(self, session: WebmateAPISession, http_session: Optional[requests.Session] = None):
        """
        Create an ArtifactClient for a session

        Args:
            session: The WebmateAPISession used by the client
            http_session: Optional preconfigured requests.Session used for the connection
        """
        self.session = session
        self.api_client = ArtifactApiClient(
            WebmateApiClient(session.auth_info, session.environment, http_session)
        )

    def query_artifacts(
        self,
        project_id: ProjectId,
        test_run_id: TestRunId,
        types: Iterable[ArtifactType] = ()
    ) -> List[ArtifactInfo]:
        """
        Retrieve the infos of the artifacts associated with a TestRun in a project

        Args:
            project_id: Project id
            test_run_id: TestRun the artifacts are associated with
            types: Only return artifacts of these types. All types if empty

        Raises:
            WebmateApiClientException: If the project does not exist
        """
        result = self.api_client.query_artifacts(project_id, test_run_id, types)
        if not result.is_present():
            raise WebmateApiClientException(f"Could not query artifacts of project {project_id}. Got no response")
        return result.get()

    def get_artifact(self, artifact_id: ArtifactId) -> OptionalResult[Artifact]:
        """Retrieve an Artifact. ABSENT if there is no such Artifact"""
        return self.api_client.get_artifact(artifact_id)
