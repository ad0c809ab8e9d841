from typing import Any, Dict, Optional

from faker import Faker

from tsmock.models.domain_models import Entity, PrimitiveType


class ValueSynthesizer:
    """Produces random JSON values for primitive properties. Not shared between requests."""

    def __init__(self, faker: Optional[Faker] = None, number_pattern: str = "###", locale: str = "en_US"):
        if faker is None:
            faker = Faker(locale)
            # Faker() draws from a module-level Random unless given its own
            faker.seed_instance()
        self.faker = faker
        self.number_pattern = number_pattern

    def random_boolean(self) -> bool:
        return self.faker.pybool()

    def random_integer(self) -> int:
        return int(self.faker.numerify(self.number_pattern))

    def random_word(self) -> str:
        return self.faker.word()

    def synthesize(self, primitive: PrimitiveType) -> Any:
        if primitive is PrimitiveType.BOOLEAN:
            return self.random_boolean()
        if primitive is PrimitiveType.NUMBER:
            return self.random_integer()
        return self.random_word()

    def synthesize_entity(self, entity: Entity) -> Dict[str, Any]:
        """Build a response object keyed by property name, in declaration order."""
        data: Dict[str, Any] = {}
        for prop in entity.properties:
            data[prop.name] = self.synthesize(prop.type)
        return data
