from .prompt import Prompt
from .prompts_library import PromptsLibrary
from .research import ResearchContext, generate_research_prompt, system_prompt

__all__ = [
    "Prompt",
    "PromptsLibrary",
    "ResearchContext",
    "generate_research_prompt",
    "system_prompt",
]
