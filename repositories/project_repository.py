from models.project import Project
from repositories.base_repository import DocumentRepository


class ProjectRepository(DocumentRepository):
    model = Project
