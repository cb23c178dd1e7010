"""
Artifact Client Tests
"""

from urllib.parse import parse_qs, urlparse

import pytest

from webmate.api.exceptions import WebmateApiClientException
from webmate.api.result import ABSENT
from webmate.models.ids import ArtifactId, BrowserSessionId, TestRunId
from webmate.models.types import ArtifactType

TEST_RUN_UUID = "b2d4f6a8-1c3e-4a5b-9d7f-0e2c4a6b8d10"
ARTIFACT_UUID = "e8c0a2b4-6d8f-4fa0-b2c4-5d7f9b1c3e43"
BROWSER_SESSION_UUID = "f0b2c4d6-8e0a-4b2c-94d6-7f9b1d3e5a54"

ARTIFACT_INFO_JSON = {
    'id': ARTIFACT_UUID,
    'typeName': "SCREENSHOT",
    'creationTime': "2024-03-01T10:16:30Z",
    'associatedTestRuns': [TEST_RUN_UUID],
    'associatedBrowserSessions': [BROWSER_SESSION_UUID]
}


def _query(request):
    return parse_qs(urlparse(request.url).query)


@pytest.mark.api
class TestQueryArtifacts:

    def test_without_type_filter(self, artifact_client, project_id, base_url, requests_mock):
        requests_mock.get(f"{base_url}/projects/{project_id}/artifacts", json=[])

        artifact_client.query_artifacts(project_id, TestRunId(TEST_RUN_UUID), set())

        assert requests_mock.last_request.method == 'GET'
        assert _query(requests_mock.last_request) == {'testRunId': [TEST_RUN_UUID]}

    def test_with_type_filter(self, artifact_client, project_id, base_url, requests_mock):
        requests_mock.get(f"{base_url}/projects/{project_id}/artifacts", json=[])

        artifact_client.query_artifacts(
            project_id, TestRunId(TEST_RUN_UUID), {ArtifactType.SCREENSHOT, ArtifactType.LOG}
        )

        query = _query(requests_mock.last_request)
        assert query['testRunId'] == [TEST_RUN_UUID]
        assert set(query['types'][0].split(',')) == {"SCREENSHOT", "LOG"}

    def test_test_run_parameter_comes_first(self, artifact_client, project_id, base_url, requests_mock):
        requests_mock.get(f"{base_url}/projects/{project_id}/artifacts", json=[])

        artifact_client.query_artifacts(project_id, TestRunId(TEST_RUN_UUID), [ArtifactType.LOG])

        assert urlparse(requests_mock.last_request.url).query == f"testRunId={TEST_RUN_UUID}&types=LOG"

    def test_parses_artifact_infos(self, artifact_client, project_id, base_url, requests_mock):
        requests_mock.get(f"{base_url}/projects/{project_id}/artifacts", json=[ARTIFACT_INFO_JSON])

        infos = artifact_client.query_artifacts(project_id, TestRunId(TEST_RUN_UUID))

        assert len(infos) == 1
        assert infos[0].id == ArtifactId(ARTIFACT_UUID)
        assert infos[0].artifact_type is ArtifactType.SCREENSHOT
        assert infos[0].associatedTestRuns == [TestRunId(TEST_RUN_UUID)]
        assert infos[0].associatedBrowserSessions == [BrowserSessionId(BROWSER_SESSION_UUID)]

    def test_unknown_type_name(self, artifact_client, project_id, base_url, requests_mock):
        requests_mock.get(
            f"{base_url}/projects/{project_id}/artifacts",
            json=[dict(ARTIFACT_INFO_JSON, typeName="Page.Thumbnail")]
        )

        infos = artifact_client.query_artifacts(project_id, TestRunId(TEST_RUN_UUID))

        assert infos[0].typeName == "Page.Thumbnail"
        assert infos[0].artifact_type is None

    def test_unknown_project_raises_in_facade(self, artifact_client, project_id, base_url, requests_mock):
        requests_mock.get(f"{base_url}/projects/{project_id}/artifacts", status_code=404)

        with pytest.raises(WebmateApiClientException, match="Could not query artifacts"):
            artifact_client.query_artifacts(project_id, TestRunId(TEST_RUN_UUID))

    def test_unknown_project_is_absent_in_api_client(self, artifact_client, project_id, base_url, requests_mock):
        requests_mock.get(f"{base_url}/projects/{project_id}/artifacts", status_code=404)

        result = artifact_client.api_client.query_artifacts(project_id, TestRunId(TEST_RUN_UUID))

        assert result is ABSENT

    def test_no_content_is_absent_in_api_client(self, artifact_client, project_id, base_url, requests_mock):
        requests_mock.get(f"{base_url}/projects/{project_id}/artifacts", status_code=204)

        result = artifact_client.api_client.query_artifacts(project_id, TestRunId(TEST_RUN_UUID))

        assert result is ABSENT


@pytest.mark.api
class TestGetArtifact:

    def test_present_with_data(self, artifact_client, base_url, requests_mock):
        requests_mock.get(
            f"{base_url}/artifact/artifacts/{ARTIFACT_UUID}",
            json=dict(ARTIFACT_INFO_JSON, data={'url': "https://example.com/shot.png"})
        )

        artifact = artifact_client.get_artifact(ArtifactId(ARTIFACT_UUID)).get()

        assert artifact.id == ArtifactId(ARTIFACT_UUID)
        assert artifact.data == {'url': "https://example.com/shot.png"}

    def test_not_found_is_absent(self, artifact_client, base_url, requests_mock):
        requests_mock.get(f"{base_url}/artifact/artifacts/{ARTIFACT_UUID}", status_code=404)

        assert artifact_client.get_artifact(ArtifactId(ARTIFACT_UUID)) is ABSENT

    def test_no_content_is_absent(self, artifact_client, base_url, requests_mock):
        requests_mock.get(f"{base_url}/artifact/artifacts/{ARTIFACT_UUID}", status_code=204)

        assert artifact_client.get_artifact(ArtifactId(ARTIFACT_UUID)) is ABSENT
