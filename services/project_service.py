from typing import Optional

from models.project import Project
from repositories.project_repository import ProjectRepository
from services.document_service import DocumentService
from services.query_builder import ListConfig, ListQuery, Page
from utils.validators import clean_text


class ProjectService(DocumentService):
    repository = ProjectRepository
    label = "Project"
    list_config = ListConfig(default_sort="created_at")

    @classmethod
    def create(cls, name: Optional[str], description: Optional[str] = None) -> Project:
        name = clean_text(name)
        cls._require({"name": name}, "name")
        project = ProjectRepository.create(name=name, description=description)
        return cls._save(project, "created")

    @classmethod
    def update(cls, project_id: int, name: Optional[str] = None, description: Optional[str] = None) -> Project:
        changes = {}
        name = clean_text(name)
        if name is not None:
            changes["name"] = name
        if description is not None:
            changes["description"] = description
        cls._require_changes(changes)
        project = cls.get(project_id)
        ProjectRepository.update(project, **changes)
        return cls._save(project, "updated")

    @classmethod
    def search(cls, list_query: ListQuery) -> Page:
        """Several filters and sort keys at once; same engine as list()."""
        return cls.list(list_query)
