"""Projects, their members and invitations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"
    DELETED = "deleted"

    def __str__(self) -> str:
        return self.value


class ProjectVisibility(str, Enum):
    PRIVATE = "private"
    PUBLIC = "public"
    TEAM = "team"

    def __str__(self) -> str:
        return self.value


@dataclass(kw_only=True)
class ProjectResponse:
    """Project as returned to clients, with parsed status and visibility."""

    id: UUID
    name: str
    color: str
    status: ProjectStatus
    visibility: ProjectVisibility
    owner_id: UUID
    version: int
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    icon: str | None = None
    settings: Any = None
    technologies: list[str] | None = None
    repository_url: str | None = None
    live_url: str | None = None
    task_count: int | None = None
    note_count: int | None = None


@dataclass(kw_only=True)
class Project:
    """A stored project row; ``status`` and ``visibility`` are raw text."""

    id: UUID
    name: str
    color: str
    status: str
    visibility: str
    owner_id: UUID
    version: int
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    icon: str | None = None
    settings: Any = None
    technologies: Any = None
    repository_url: str | None = None
    live_url: str | None = None

    def parsed_status(self) -> ProjectStatus:
        """The status; unknown text counts as active."""
        try:
            return ProjectStatus(self.status)
        except ValueError:
            return ProjectStatus.ACTIVE

    def parsed_visibility(self) -> ProjectVisibility:
        """The visibility; unknown text counts as private."""
        try:
            return ProjectVisibility(self.visibility)
        except ValueError:
            return ProjectVisibility.PRIVATE

    def technology_list(self) -> list[str]:
        """String entries of the stored technologies array; anything else is ignored."""
        if not isinstance(self.technologies, list):
            return []
        return [item for item in self.technologies if isinstance(item, str)]

    def into_response(self) -> ProjectResponse:
        return ProjectResponse(
            id=self.id,
            name=self.name,
            description=self.description,
            color=self.color,
            icon=self.icon,
            status=self.parsed_status(),
            visibility=self.parsed_visibility(),
            owner_id=self.owner_id,
            settings=self.settings,
            technologies=self.technology_list(),
            repository_url=self.repository_url,
            live_url=self.live_url,
            version=self.version,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(kw_only=True)
class CreateProjectRequest:
    name: str
    visibility: ProjectVisibility
    description: str | None = None
    color: str | None = None
    icon: str | None = None
    technologies: list[str] | None = None
    repository_url: str | None = None
    live_url: str | None = None


@dataclass(kw_only=True)
class UpdateProjectRequest:
    name: str | None = None
    description: str | None = None
    color: str | None = None
    icon: str | None = None
    visibility: ProjectVisibility | None = None
    technologies: list[str] | None = None
    repository_url: str | None = None
    live_url: str | None = None
    settings: Any = None


@dataclass(kw_only=True)
class ProjectMember:
    id: UUID
    project_id: UUID
    user_id: UUID
    role: str
    is_active: bool
    permissions: Any = None
    invited_by: UUID | None = None
    invited_at: datetime | None = None
    joined_at: datetime | None = None


@dataclass(kw_only=True)
class ProjectInvitation:
    id: UUID
    project_id: UUID
    email: str
    role: str
    invited_by: UUID
    expires_at: datetime
    created_at: datetime