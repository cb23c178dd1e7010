"""
Facade of the webmate Device subsystem
"""

from typing import List, Optional

import requests

from webmate.api.base_client import WebmateApiClient
from webmate.api.device_api import DeviceApiClient
from webmate.api.session import WebmateAPISession
from webmate.models.ids import DeviceId, ProjectId


class DeviceClient:
    """Facade of the Device subsystem"""

    def __init__(self, session: WebmateAPISession, http_session: Optional[requests.Session] = None):
        """
        Create a DeviceClient for a session

        Args:
            session: The WebmateAPISession used by the client
            http_session: Optional preconfigured requests.Session used for the connection
        """
        self.session = session
        self.api_client = DeviceApiClient(
            WebmateApiClient(session.auth_info, session.environment, http_session)
        )

    def get_device_ids_for_project(self, project_id: ProjectId) -> List[DeviceId]:
        """
        Get all Device ids of a project

        Args:
            project_id: Id of the project (as found in the dashboard)
        """
        return self.api_client.get_device_ids_for_project(project_id)

    def synchronize_device(self, device_id: DeviceId) -> None:
        """
        Synchronize webmate with a device. Usually not necessary

        Args:
            device_id: Id of the device, shown in the "Details" dialog of the device overview
        """
        self.api_client.synchronize_device(device_id)

    def release_device(self, device_id: DeviceId) -> None:
        """Release a device. It will not be deployed afterwards"""
        self.api_client.release_device(device_id)
