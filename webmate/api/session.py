"""
Session objects shared by all webmate clients
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from webmate.api.config import APIConfig
from webmate.api.exceptions import WebmatePreconditionError
from webmate.api.result import ABSENT, OptionalResult, Present
from webmate.models.ids import ProjectId


@dataclass(frozen=True)
class WebmateAuthInfo:
    """Credentials of a webmate user: login email address and API key"""
    email_address: str
    api_key: str = field(repr=False)

    def headers(self) -> Dict[str, str]:
        """Authentication headers expected by the webmate API"""
        return {
            'webmate.user': self.email_address,
            'webmate.api-token': self.api_key
        }


@dataclass(frozen=True)
class WebmateEnvironment:
    """Target webmate installation, identified by the base URL of its API"""
    base_url: str

    @classmethod
    def from_config(cls, env: Optional[str] = None) -> 'WebmateEnvironment':
        """
        Build an environment from APIConfig

        Args:
            env: Environment name (prod, staging, local). Defaults to WEBMATE_ENV
        """
        return cls(APIConfig.get_base_url(env))


@dataclass(frozen=True)
class WebmateAPISession:
    """
    Bundle of credentials, environment and, optionally, the current project

    The clients never modify a session. Use with_project() to get a copy bound
    to another project.
    """
    auth_info: WebmateAuthInfo
    environment: WebmateEnvironment
    project_id: Optional[ProjectId] = None

    def get_project_id(self) -> OptionalResult[ProjectId]:
        return Present(self.project_id) if self.project_id is not None else ABSENT

    def require_project_id(self, purpose: str) -> ProjectId:
        """
        Return the current project or fail before anything is sent to the server

        Args:
            purpose: Name of the object that needs the project, used in the error message

        Raises:
            WebmatePreconditionError: If the session has no current project
        """
        if self.project_id is None:
            raise WebmatePreconditionError(
                f"A {purpose} must be associated with a project and none is provided or associated with the API session"
            )
        return self.project_id

    def with_project(self, project_id: ProjectId) -> 'WebmateAPISession':
        return replace(self, project_id=project_id)

    @classmethod
    def from_env(cls, env: Optional[str] = None) -> 'WebmateAPISession':
        """
        Build a session from the WEBMATE_* environment variables (or .env file)

        Raises:
            WebmatePreconditionError: If WEBMATE_USERNAME or WEBMATE_API_KEY is not set
        """
        if not APIConfig.USERNAME or not APIConfig.API_KEY:
            raise WebmatePreconditionError("WEBMATE_USERNAME and WEBMATE_API_KEY must be set")

        project_id = ProjectId(APIConfig.PROJECT_ID) if APIConfig.PROJECT_ID else None
        return cls(
            auth_info=WebmateAuthInfo(APIConfig.USERNAME, APIConfig.API_KEY),
            environment=WebmateEnvironment.from_config(env),
            project_id=project_id
        )
