import logging
from pathlib import Path

import yaml

from .prompt import Prompt

logger = logging.getLogger(__name__)

BUNDLED_DIRECTORY = Path(__file__).parent / "library"


class PromptsLibrary:
    def __init__(self, directory: str | Path = BUNDLED_DIRECTORY) -> None:
        self._prompts: dict[tuple[str, str], Prompt] = {}
        logger.info("Initializing PromptsLibrary from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d prompts", len(self._prompts))

    def get(self, name: str, version: str) -> Prompt:
        logger.debug("Getting prompt: name=%s, version=%s", name, version)
        try:
            return self._prompts[(name, version)]
        except KeyError:
            logger.error("Prompt not found: name=%s, version=%s", name, version)
            raise KeyError(f"Prompt '{name}' version '{version}' not found")

    def latest(self, name: str) -> Prompt:
        """Highest version of `name`, comparing dotted versions numerically."""
        versions = [prompt for (key, _), prompt in self._prompts.items() if key == name]
        if not versions:
            logger.error("Prompt not found: name=%s", name)
            raise KeyError(f"Prompt '{name}' not found")
        return max(versions, key=lambda p: tuple(int(x) for x in p.version.split(".")))

    def list(self) -> list[tuple[str, str]]:
        return list(self._prompts.keys())

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            prompt = self._load_prompt(file_path)
            self._prompts[(prompt.name, prompt.version)] = prompt
            logger.debug(
                "Loaded prompt: %s v%s from %s", prompt.name, prompt.version, file_path
            )

    def _load_prompt(self, file_path: Path) -> Prompt:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return Prompt(**data)
