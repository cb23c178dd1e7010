"""
Device API Client
Lists, synchronizes and releases devices of a project
"""

from typing import List

from webmate.api.base_client import WebmateApiClient
from webmate.api.exceptions import WebmateNoResponseError
from webmate.api.uri_template import UriTemplate
from webmate.models.ids import DeviceId, ProjectId


class DeviceApiClient:
    """One method per endpoint of the Device subsystem"""

    GET_DEVICE_IDS_FOR_PROJECT = UriTemplate("/project/${projectId}/device/devices")
    SYNCHRONIZE_DEVICE = UriTemplate("/device/devices/${deviceId}/sync")
    RELEASE_DEVICE = UriTemplate("/device/devices/${deviceId}")

    def __init__(self, client: WebmateApiClient):
        self.client = client
        self.logger = client.logger

    def get_device_ids_for_project(self, project_id: ProjectId) -> List[DeviceId]:
        """
        Get the ids of all devices in a project

        API Endpoint: GET /project/{projectId}/device/devices

        Raises:
            WebmateNoResponseError: If the server returned no device list
        """
        response = self.client.send_get(self.GET_DEVICE_IDS_FOR_PROJECT, {'projectId': str(project_id)})
        if not response.has_body():
            raise WebmateNoResponseError("Could not get device list. Got no response")

        device_ids = self.client.codec.decode_response(response.opt_http_response.get(), List[DeviceId], 'device list')
        self.logger.info(f"Found {len(device_ids)} device(s) in project {project_id}")
        return device_ids

    def synchronize_device(self, device_id: DeviceId) -> None:
        """API Endpoint: POST /device/devices/{deviceId}/sync"""
        self.logger.info(f"Synchronizing device {device_id}")
        self.client.send_post(self.SYNCHRONIZE_DEVICE, {'deviceId': str(device_id)})

    def release_device(self, device_id: DeviceId) -> None:
        """API Endpoint: DELETE /device/devices/{deviceId}"""
        self.logger.info(f"Releasing device {device_id}")
        self.client.send_delete(self.RELEASE_DEVICE, {'deviceId': str(device_id)})
