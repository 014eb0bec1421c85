import uuid
from app.domain.services_interfaces.id_generator import IdGeneratorInterface


class UuidGenerator(IdGeneratorInterface):
    def generate(self) -> str:
        return str(uuid.uuid4())
