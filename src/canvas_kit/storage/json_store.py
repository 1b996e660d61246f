"""Flat-file JSON store: one file per project and one per entity."""

import asyncio
import json
import logging
import random
import string
import time
from pathlib import Path

from canvas_kit.observability import names
from canvas_kit.observability.base import MetricsHook, NoOpMetricsHook
from canvas_kit.research.types import utc_now_iso

from .base import EntityStore, Record

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id() -> str:
    suffix = "".join(random.choices(_ID_ALPHABET, k=7))
    return f"{int(time.time() * 1000)}-{suffix}"


class JsonEntityStore(EntityStore):
    """Entity store backed by JSON files under `data_dir`.

    Layout:
        <data_dir>/projects/<project_id>.json
        <data_dir>/entities/<entity_id>.json

    Each project keeps `{id, type}` references to its entities. Writes are
    not atomic and concurrent writers are not coordinated.

    Example:
        >>> store = JsonEntityStore(Path.home() / ".business-design")
        >>> project = await store.create_project(name="Acme")
        >>> entity = await store.create_entity(project["id"], {"type": "swot-analysis"})
    """

    def __init__(
        self,
        data_dir: str | Path,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.metrics_hook = metrics_hook
        self._projects_dir = Path(data_dir) / "projects"
        self._entities_dir = Path(data_dir) / "entities"

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def create_project(
        self,
        *,
        name: str,
        description: str | None = None,
        tags: list[str] | None = None,
    ) -> Record:
        now = utc_now_iso()
        project: Record = {
            "id": generate_id(),
            "name": name,
            "description": description,
            "tags": tags,
            "createdAt": now,
            "updatedAt": now,
            "entities": [],
        }
        await self._write(self._projects_dir / f"{project['id']}.json", project)
        self._count("create_project")
        logger.info("Created project %s (%s)", project["id"], name)
        return project

    async def get_project(self, project_id: str) -> Record | None:
        self._count("get_project")
        return await self._read(self._projects_dir / f"{project_id}.json")

    async def list_projects(self) -> list[Record]:
        self._count("list_projects")
        projects: list[Record] = []
        for path in self._json_files(self._projects_dir):
            project = await self._read(path)
            if project is not None:
                projects.append(project)
        return sorted(projects, key=lambda p: p["updatedAt"], reverse=True)

    async def update_project(self, project: Record) -> Record:
        record = {**project, "updatedAt": utc_now_iso()}
        await self._write(self._projects_dir / f"{record['id']}.json", record)
        self._count("update_project")
        return record

    async def delete_project(self, project_id: str) -> bool:
        project = await self.get_project(project_id)
        if project is None:
            return False

        for ref in project["entities"]:
            await self._unlink(self._entities_dir / f"{ref['id']}.json")
        await self._unlink(self._projects_dir / f"{project_id}.json")
        self._count("delete_project")
        logger.info(
            "Deleted project %s with %d entities", project_id, len(project["entities"])
        )
        return True

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    async def create_entity(self, project_id: str, entity: Record) -> Record:
        project = await self.get_project(project_id)
        if project is None:
            logger.error("Project not found: %s", project_id)
            raise KeyError(f"Project '{project_id}' not found")

        now = utc_now_iso()
        record: Record = {
            **entity,
            "id": generate_id(),
            "projectId": project_id,
            "createdAt": now,
            "updatedAt": now,
        }
        await self._write(self._entities_dir / f"{record['id']}.json", record)

        project["entities"].append({"id": record["id"], "type": record.get("type")})
        await self._touch_project(project)
        self._count("create_entity")
        logger.debug(
            "Created %s entity %s in project %s",
            record.get("type"),
            record["id"],
            project_id,
        )
        return record

    async def get_entity(self, entity_id: str) -> Record | None:
        self._count("get_entity")
        return await self._read(self._entities_dir / f"{entity_id}.json")

    async def update_entity(self, entity: Record) -> Record:
        record = {**entity, "updatedAt": utc_now_iso()}
        await self._write(self._entities_dir / f"{record['id']}.json", record)
        self._count("update_entity")
        return record

    async def delete_entity(self, entity_id: str) -> bool:
        entity = await self.get_entity(entity_id)
        if entity is None:
            return False

        project = await self.get_project(entity["projectId"])
        if project is not None:
            project["entities"] = [
                ref for ref in project["entities"] if ref["id"] != entity_id
            ]
            await self._touch_project(project)

        await self._unlink(self._entities_dir / f"{entity_id}.json")
        self._count("delete_entity")
        return True

    async def list_entities(
        self, project_id: str, entity_type: str | None = None
    ) -> list[Record]:
        project = await self.get_project(project_id)
        if project is None:
            return []

        entities: list[Record] = []
        for ref in project["entities"]:
            if entity_type is not None and ref["type"] != entity_type:
                continue
            entity = await self._read(self._entities_dir / f"{ref['id']}.json")
            if entity is not None:
                entities.append(entity)
        return entities

    # ------------------------------------------------------------------
    # File helpers
    # ------------------------------------------------------------------

    async def _touch_project(self, project: Record) -> None:
        project["updatedAt"] = utc_now_iso()
        await self._write(self._projects_dir / f"{project['id']}.json", project)

    def _count(self, operation: str) -> None:
        self.metrics_hook.increment(
            names.STORE_OPERATIONS_TOTAL, labels={"operation": operation}
        )

    @staticmethod
    def _json_files(directory: Path) -> list[Path]:
        if not directory.exists():
            return []
        return sorted(directory.glob("*.json"))

    @staticmethod
    async def _read(path: Path) -> Record | None:
        def _load() -> Record | None:
            if not path.exists():
                return None
            return json.loads(path.read_text(encoding="utf-8"))

        return await asyncio.to_thread(_load)

    @staticmethod
    async def _write(path: Path, record: Record) -> None:
        def _dump() -> None:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(record, indent=2), encoding="utf-8")

        await asyncio.to_thread(_dump)

    @staticmethod
    async def _unlink(path: Path) -> None:
        await asyncio.to_thread(path.unlink, missing_ok=True)
