"""Notes, tasks and code snippets attached to projects and users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(kw_only=True)
class Note:
    id: UUID
    title: str
    content: str
    project_id: UUID
    created_at: datetime
    updated_at: datetime


@dataclass(kw_only=True)
class CreateNoteRequest:
    title: str
    content: str
    project_id: UUID


@dataclass(kw_only=True)
class UpdateNoteRequest:
    title: str | None = None
    content: str | None = None


@dataclass(kw_only=True)
class Task:
    id: UUID
    title: str
    completed: bool
    project_id: UUID
    created_at: datetime
    updated_at: datetime
    description: str | None = None


@dataclass(kw_only=True)
class CreateTaskRequest:
    title: str
    project_id: UUID
    description: str | None = None


@dataclass(kw_only=True)
class UpdateTaskRequest:
    title: str | None = None
    description: str | None = None
    completed: bool | None = None


@dataclass(kw_only=True)
class Snippet:
    id: UUID
    title: str
    code: str
    language: str
    is_public: bool
    author_id: UUID
    created_at: datetime
    updated_at: datetime
    description: str | None = None


@dataclass(kw_only=True)
class CreateSnippetRequest:
    title: str
    code: str
    language: str
    is_public: bool
    description: str | None = None


@dataclass(kw_only=True)
class UpdateSnippetRequest:
    title: str | None = None
    description: str | None = None
    code: str | None = None
    language: str | None = None
    is_public: bool | None = None