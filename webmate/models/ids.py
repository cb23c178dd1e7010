"""
Identifier Models
Typed wrappers around the UUIDs webmate assigns to its resources
"""

from uuid import UUID

from pydantic import ConfigDict, RootModel


class WebmateId(RootModel[UUID]):
    """
    Base class of all webmate identifiers

    An identifier can be created from a UUID or its string form and serializes
    back to the plain string. Two identifiers are equal when they have the same
    type and the same value.

    Example:
        >>> project_id = ProjectId("5b0f8c36-1d4e-4d1b-9f36-3d5cbd2e5a47")
        >>> str(project_id)
        '5b0f8c36-1d4e-4d1b-9f36-3d5cbd2e5a47'
    """
    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> UUID:
        return self.root

    def __str__(self):
        return str(self.root)

    def __repr__(self):
        return f"{type(self).__name__}('{self.root}')"


class ProjectId(WebmateId):
    """Id of a webmate project"""


class TestId(WebmateId):
    """Id of a Test"""


class TestRunId(WebmateId):
    """Id of a single run of a TestExecution"""


class TestExecutionId(WebmateId):
    """Id of a TestExecution"""


class TestSessionId(WebmateId):
    """Id of a TestSession"""


class ArtifactId(WebmateId):
    """Id of an Artifact"""


class BrowserSessionId(WebmateId):
    """Id of a browser session"""


class DeviceId(WebmateId):
    """Id of a Device"""


class ImageId(WebmateId):
    """Id of a device image"""


class PackageId(WebmateId):
    """Id of an app package"""
