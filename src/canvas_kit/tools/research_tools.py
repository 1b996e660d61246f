"""Research tools exposed to a calling agent."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from canvas_kit.llms.base import ResearchClient, ResearchUsage
from canvas_kit.llms.config import DEFAULT_RESEARCH_MODEL, DeepResearchModel
from canvas_kit.prompts import PromptsLibrary, ResearchContext, generate_research_prompt
from canvas_kit.research import (
    Citation,
    FrameworkType,
    ParsedResult,
    RawCitation,
    parse_research_result,
)
from canvas_kit.research.types import utc_now_iso
from canvas_kit.storage.base import EntityStore, Record

from .tool import Tool
from .tool_registry import ToolRegistry

logger = logging.getLogger(__name__)


class _Input(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


class RawCitationInput(_Input):
    title: str = "Untitled"
    url: str = Field(min_length=1)
    start_index: int | None = None
    end_index: int | None = None


class ParseResearchInput(_Input):
    framework_type: FrameworkType
    content: str
    citations: list[RawCitationInput] = Field(default_factory=list)


class DeepResearchInput(_Input):
    framework_type: FrameworkType
    context: ResearchContext
    model: DeepResearchModel = DEFAULT_RESEARCH_MODEL


class ResearchAndCreateInput(DeepResearchInput):
    project_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str | None = None


class PopulateFrameworkInput(_Input):
    project_id: str = Field(min_length=1)
    framework_type: FrameworkType
    name: str = Field(min_length=1)
    description: str | None = None
    research_data: dict[str, Any]
    citations: list[Citation] = Field(default_factory=list)
    research_model: str | None = None
    confidence: int | None = Field(default=None, ge=0, le=100)


def entity_record(
    framework: str,
    data: dict[str, Any],
    *,
    name: str,
    description: str | None,
    citations: list[Citation],
    research_model: str | None,
    confidence: int | None,
) -> Record:
    """Entity record for `framework` built from camelCase parsed data.

    Market values that are missing are stored as 0 in USD per year. A
    persona payload stores its first persona. The caller's dict is not
    modified.
    """
    fields = dict(data)
    entity: Record = {"type": framework, "name": name}
    if description:
        entity["description"] = description

    if framework == "market-sizing":
        for key in ("tam", "sam", "som"):
            fields[key] = {"value": 0, "currency": "USD", "unit": "annual"} | (
                fields.get(key) or {}
            )
            if fields[key]["value"] is None:
                fields[key]["value"] = 0
    elif framework == "user-persona":
        personas = fields.pop("personas", None) or []
        first: dict[str, Any] = personas[0] if personas else {}
        fields = {
            "name": first.get("name", name),
            "demographics": first.get("demographics", {}),
            "psychographics": {},
            "behavior": first.get(
                "behavior", {"goals": [], "frustrations": [], "motivations": []}
            ),
        }

    entity.update(fields)
    entity["researchMetadata"] = {
        "citations": [c.model_dump(by_alias=True) for c in citations],
        "researchedAt": utc_now_iso(),
        "researchModel": research_model,
        "confidence": confidence,
    }
    return entity


def build_entity(
    result: ParsedResult,
    *,
    name: str,
    description: str | None,
    research_model: str,
) -> Record:
    """Entity record for a fresh parse result."""
    return entity_record(
        result.framework,
        result.data.model_dump(by_alias=True, exclude_none=True),
        name=name,
        description=description,
        citations=result.citations,
        research_model=research_model,
        confidence=result.confidence,
    )


def register_research_tools(
    registry: ToolRegistry,
    *,
    client: ResearchClient,
    store: EntityStore | None = None,
    library: PromptsLibrary | None = None,
) -> None:
    """Register the research tool set.

    Tools:
    - `parse_research`: parse already-fetched research text; no network.
    - `deep_research`: run a research call and parse its response.
    - `populate_framework`: store already-parsed research data as an entity
      (only when a store is given).
    - `research_and_create`: deep research, then store the result as an
      entity (only when a store is given).
    """
    prompts = library or PromptsLibrary()
    system = prompts.get("system", "1.0").render()

    def _parse(input_data: ParseResearchInput) -> dict[str, Any]:
        raw_citations = [
            RawCitation(
                title=c.title,
                url=c.url,
                start_index=c.start_index,
                end_index=c.end_index,
            )
            for c in input_data.citations
        ]
        result = parse_research_result(
            input_data.framework_type, input_data.content, raw_citations
        )
        return result.to_dict()

    async def _research(input_data: DeepResearchInput) -> tuple[ParsedResult, ResearchUsage]:
        user_prompt = generate_research_prompt(
            input_data.framework_type, input_data.context, prompts
        )
        response = await client.research(
            system_prompt=system, user_prompt=user_prompt, model=input_data.model
        )
        parsed = parse_research_result(
            input_data.framework_type, response.content, response.citations
        )
        logger.info(
            "Research for %s finished: confidence=%d, missing=%s",
            input_data.framework_type,
            parsed.confidence,
            parsed.missing_fields,
        )
        return parsed, response.usage

    def _usage(usage: ResearchUsage) -> dict[str, Any]:
        return {
            "inputTokens": usage.input_tokens,
            "outputTokens": usage.output_tokens,
            "totalTokens": usage.total_tokens,
            "estimatedCostUSD": usage.estimated_cost_usd,
        }

    async def _deep_research(input_data: DeepResearchInput) -> dict[str, Any]:
        parsed, usage = await _research(input_data)
        payload = parsed.to_dict()
        return {
            "frameworkType": input_data.framework_type,
            "rawContent": payload["rawContent"],
            "parsedData": payload["data"],
            "citations": payload["citations"],
            "confidence": parsed.confidence,
            "missingFields": payload["missingFields"],
            "warnings": payload["warnings"],
            "usage": _usage(usage),
        }

    registry.register(
        Tool(
            name="parse_research",
            description=(
                "Parse research text into structured framework data with "
                "citations and a confidence score."
            ),
            input_schema=ParseResearchInput,
            handler=_parse,
        )
    )
    registry.register(
        Tool(
            name="deep_research",
            description=(
                "Run web-backed deep research for a business framework and "
                "return parsed data, citations and confidence."
            ),
            input_schema=DeepResearchInput,
            handler=_deep_research,
        )
    )

    if store is None:
        return

    async def _populate_framework(input_data: PopulateFrameworkInput) -> dict[str, Any]:
        entity = await store.create_entity(
            input_data.project_id,
            entity_record(
                input_data.framework_type,
                input_data.research_data,
                name=input_data.name,
                description=input_data.description,
                citations=input_data.citations,
                research_model=input_data.research_model,
                confidence=input_data.confidence,
            ),
        )
        return {
            "entityId": entity["id"],
            "type": entity["type"],
            "name": entity["name"],
            "citationCount": len(input_data.citations),
        }

    registry.register(
        Tool(
            name="populate_framework",
            description=(
                "Create a framework entity from parsed research data and its "
                "citations, as returned by parse_research or deep_research."
            ),
            input_schema=PopulateFrameworkInput,
            handler=_populate_framework,
        )
    )

    async def _research_and_create(input_data: ResearchAndCreateInput) -> dict[str, Any]:
        parsed, usage = await _research(input_data)
        entity = await store.create_entity(
            input_data.project_id,
            build_entity(
                parsed,
                name=input_data.name,
                description=input_data.description,
                research_model=input_data.model,
            ),
        )
        return {
            "entity": {
                "id": entity["id"],
                "type": entity["type"],
                "name": entity["name"],
            },
            "research": {
                "confidence": parsed.confidence,
                "citationCount": len(parsed.citations),
                "missingFields": list(parsed.missing_fields),
            },
            "usage": _usage(usage),
        }

    registry.register(
        Tool(
            name="research_and_create",
            description=(
                "Run deep research and store the result as a new framework "
                "entity in a project."
            ),
            input_schema=ResearchAndCreateInput,
            handler=_research_and_create,
        )
    )
