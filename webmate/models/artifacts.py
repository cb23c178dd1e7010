"""
Artifact Models
Pydantic models for artifacts recorded during test runs and browser sessions
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from webmate.models.ids import ArtifactId, BrowserSessionId, ProjectId, TestRunId
from webmate.models.types import ArtifactType


class ArtifactInfo(BaseModel):
    """Metadata of an artifact, as returned by artifact queries"""
    model_config = ConfigDict(frozen=True)

    id: ArtifactId
    typeName: str
    projectId: Optional[ProjectId] = None
    creationTime: Optional[datetime] = None
    associatedTestRuns: List[TestRunId] = Field(default_factory=list)
    associatedBrowserSessions: List[BrowserSessionId] = Field(default_factory=list)

    @property
    def artifact_type(self) -> Optional[ArtifactType]:
        """ArtifactType matching typeName, or None for types unknown to this SDK"""
        return ArtifactType.from_type_name(self.typeName)


class Artifact(ArtifactInfo):
    """Artifact including its payload"""
    data: Any = None
