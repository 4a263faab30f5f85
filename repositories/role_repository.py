from models.role import Role
from repositories.base_repository import DocumentRepository


class RoleRepository(DocumentRepository):
    model = Role
