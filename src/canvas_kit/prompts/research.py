import logging

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from canvas_kit.research.types import FRAMEWORK_TYPES

from .prompts_library import PromptsLibrary

logger = logging.getLogger(__name__)

SYSTEM_PROMPT_NAME = "system"
PROMPT_VERSION = "1.0"


class ResearchContext(BaseModel):
    """What the caller knows about the business being researched."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    business_description: str = Field(min_length=1)
    industry: str | None = None
    geography: str | None = None
    target_customers: str | None = None
    product_or_service: str | None = None
    competitors: list[str] | None = None


def system_prompt(library: PromptsLibrary | None = None) -> str:
    library = library or PromptsLibrary()
    return library.get(SYSTEM_PROMPT_NAME, PROMPT_VERSION).render()


def generate_research_prompt(
    framework: str,
    context: ResearchContext,
    library: PromptsLibrary | None = None,
) -> str:
    """Render the research request for one framework.

    Raises:
        KeyError: If `framework` has no prompt in the library.
    """
    if framework not in FRAMEWORK_TYPES:
        logger.error("No research prompt for framework: %s", framework)
        raise KeyError(f"Prompt '{framework}' not found")

    library = library or PromptsLibrary()
    prompt = library.get(framework, PROMPT_VERSION)
    return prompt.render(
        business_description=context.business_description,
        industry=context.industry,
        geography=context.geography,
        target_customers=context.target_customers,
        # Falls back to the business description, not to a fixed default
        product_or_service=context.product_or_service or context.business_description,
        competitors=", ".join(context.competitors) if context.competitors else None,
    )
