"""
Clients package
Public facades of the webmate subsystems
"""

from webmate.clients.testmgmt_client import TestMgmtClient, TestRun, TestSession
from webmate.clients.artifact_client import ArtifactClient
from webmate.clients.device_client import DeviceClient

__all__ = [
    'TestMgmtClient',
    'TestRun',
    'TestSession',
    'ArtifactClient',
    'DeviceClient',
]
