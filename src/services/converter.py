"""
Converter between client-facing entities and persisted domain data.

Stored shapes carry nested children (a stored show has seasons), the
client-facing shapes don't. Conversion goes through model dumps so the
result never shares nested objects with the source.
"""

from typing import Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel

E = TypeVar("E", bound=BaseModel)
D = TypeVar("D", bound=BaseModel)

# Fields never taken from client data when updating stored data
PROTECTED_FIELDS = {"id", "position"}


class Converter:
    """Maps entities to domain data and back."""

    def to_external(self, domain: BaseModel, entity_class: Type[E]) -> E:
        """
        Convert stored data to the client-facing shape.

        Args:
            domain: Stored data
            entity_class: Client-facing model class

        Returns:
            New entity without nested children
        """
        fields = set(entity_class.model_fields)
        return entity_class.model_validate(domain.model_dump(include=fields))

    def to_domain(
        self,
        entity: BaseModel,
        domain_class: Type[D],
        base: Optional[BaseModel] = None,
    ) -> D:
        """
        Convert client data to the stored shape.

        Args:
            entity: Client-facing entity
            domain_class: Stored model class
            base: Existing stored data; its ID, position and nested
                children are kept while every other field is replaced

        Returns:
            New domain object
        """
        if base is None:
            return domain_class.model_validate(entity.model_dump())

        data = base.model_dump()
        data.update(entity.model_dump(exclude=PROTECTED_FIELDS))
        return domain_class.model_validate(data)

    def convert_collection(self, items: Iterable[BaseModel], entity_class: Type[E]) -> List[E]:
        """Convert stored data element-wise to the client-facing shape."""
        return [self.to_external(item, entity_class) for item in items]
