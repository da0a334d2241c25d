"""Output schema registry - separate module to avoid circular imports."""

from collections.abc import Callable

from pydantic import BaseModel

# Maps a command id such as "service.status" to its output model
_SCHEMAS: dict[str, type[BaseModel]] = {}


def output_schema(command_id: str) -> Callable[[type[BaseModel]], type[BaseModel]]:
    """Class decorator registering the output model of ``command_id``.

    ``command_id`` is "<domain>.<command>", the command named without its
    ``cmd_`` prefix.
    """

    def register(schema_class: type[BaseModel]) -> type[BaseModel]:
        if command_id in _SCHEMAS:
            raise ValueError(f"Schema already registered for {command_id}")
        _SCHEMAS[command_id] = schema_class
        return schema_class

    return register


def get_output_schema(command_id: str) -> type[BaseModel] | None:
    return _SCHEMAS.get(command_id)
