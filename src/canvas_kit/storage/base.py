from typing import Any, Protocol

from canvas_kit.observability.base import MetricsHook

Record = dict[str, Any]


class EntityStore(Protocol):
    """Persistence for projects and the framework entities inside them.

    Records are plain JSON-compatible dicts with camelCase keys. Missing ids
    return None (or False for deletes) rather than raising.
    """

    metrics_hook: MetricsHook

    async def create_project(
        self,
        *,
        name: str,
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> Record: ...

    async def get_project(self, project_id: str) -> Record | None: ...

    async def list_projects(self) -> list[Record]: ...

    async def update_project(self, project: Record) -> Record: ...

    async def delete_project(self, project_id: str) -> bool: ...

    async def create_entity(self, project_id: str, entity: Record) -> Record:
        """Store `entity` under `project_id`, assigning id and timestamps.

        Raises:
            KeyError: If the project does not exist.
        """
        ...

    async def get_entity(self, entity_id: str) -> Record | None: ...

    async def update_entity(self, entity: Record) -> Record: ...

    async def delete_entity(self, entity_id: str) -> bool: ...

    async def list_entities(
        self, project_id: str, entity_type: str | None = None
    ) -> list[Record]: ...
