"""
Domain errors raised by the data layer and mapped to HTTP responses by the API.
"""


class EntityNotFoundError(Exception):
    """A lookup by primary key found no row.

    ``type_name`` is the wire name reported in error bodies so existing
    clients keep matching on it.
    """

    type_name = "EntityNotFoundException"

    def __init__(self, entity_name: str, key):
        self.entity_name = entity_name
        self.key = key
        super().__init__(f"{entity_name} with id {key} not found")

    @property
    def message(self) -> str:
        return str(self)
