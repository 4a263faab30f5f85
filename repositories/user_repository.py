# repositories/user_repository.py
from models.user import User
from repositories.base_repository import DocumentRepository


class UserRepository(DocumentRepository):
    """
    User persistence.
    - Does not hash passwords or check uniqueness; the service does.
    """

    model = User
