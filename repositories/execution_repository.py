from models.execution import TestStepExecution
from repositories.base_repository import DocumentRepository


class TestStepExecutionRepository(DocumentRepository):
    model = TestStepExecution
