from pathlib import Path

import pytest
from pydantic import ValidationError

from canvas_kit.prompts.prompt import Prompt
from canvas_kit.prompts.prompts_library import PromptsLibrary


@pytest.fixture
def prompts_dir(tmp_path: Path) -> Path:
    """Create a temp directory with sample YAML prompt files."""
    # First prompt
    (tmp_path / "greeting.yaml").write_text(
        """name: greeting
version: "1.0"
description: A simple greeting prompt
inputs:
  user_name: The name of the user to greet
template: Hello, {user_name}!
"""
    )

    # Second prompt - different version of greeting
    (tmp_path / "greeting_v2.yaml").write_text(
        """name: greeting
version: "2.0"
description: An enhanced greeting prompt
inputs:
  user_name: The name of the user to greet
  time_of_day: Morning, afternoon, or evening
defaults:
  time_of_day: day
template: Good {time_of_day}, {user_name}!
"""
    )

    # Third prompt - different name
    (tmp_path / "summarize.yaml").write_text(
        """name: summarize
version: "1.0"
description: Summarize text content
inputs:
  text: The text to summarize
  max_length: Maximum length of summary
template: |
  Please summarize the following text in {max_length} words or less:
  {text}
"""
    )

    return tmp_path


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create an empty temp directory."""
    return tmp_path


class TestPromptsLibrary:
    def test_loads_prompts_from_directory(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        assert len(library.list()) == 3

    def test_get_prompt_by_name_and_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        prompt = library.get("greeting", "1.0")

        assert prompt.name == "greeting"
        assert prompt.version == "1.0"
        assert prompt.description == "A simple greeting prompt"
        assert prompt.inputs == {"user_name": "The name of the user to greet"}
        assert prompt.template == "Hello, {user_name}!"
        assert prompt.defaults == {}

    def test_get_raises_keyerror_for_unknown_prompt(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        with pytest.raises(KeyError, match="Prompt 'unknown' version '1.0' not found"):
            library.get("unknown", "1.0")

    def test_get_raises_keyerror_for_unknown_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        with pytest.raises(KeyError, match="Prompt 'greeting' version '9.9' not found"):
            library.get("greeting", "9.9")

    def test_latest_picks_highest_version(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        assert library.latest("greeting").version == "2.0"

    def test_latest_raises_keyerror_for_unknown_prompt(
        self, prompts_dir: Path
    ) -> None:
        library = PromptsLibrary(str(prompts_dir))

        with pytest.raises(KeyError, match="Prompt 'unknown' not found"):
            library.latest("unknown")

    def test_list_returns_name_version_tuples(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        prompts = library.list()

        assert ("greeting", "1.0") in prompts
        assert ("greeting", "2.0") in prompts
        assert ("summarize", "1.0") in prompts

    def test_empty_directory_loads_no_prompts(self, empty_dir: Path) -> None:
        library = PromptsLibrary(str(empty_dir))

        assert library.list() == []

    def test_prompt_is_pydantic_model(self, prompts_dir: Path) -> None:
        library = PromptsLibrary(str(prompts_dir))

        prompt = library.get("summarize", "1.0")

        assert isinstance(prompt, Prompt)

    def test_prompt_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError, match="extra"):
            Prompt(
                name="greeting",
                version="1.0",
                description="Greets",
                inputs={},
                template="Hi",
                author="someone",
            )


class TestPromptRender:
    def test_fills_placeholders(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("greeting", "1.0")

        assert prompt.render(user_name="Ada") == "Hello, Ada!"

    def test_empty_values_use_defaults(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("greeting", "2.0")

        assert prompt.render(user_name="Ada", time_of_day="") == "Good day, Ada!"
        assert prompt.render(user_name="Ada", time_of_day=None) == "Good day, Ada!"
        assert prompt.render(user_name="Ada", time_of_day="evening") == (
            "Good evening, Ada!"
        )

    def test_missing_values_render_blank(self, prompts_dir: Path) -> None:
        prompt = PromptsLibrary(str(prompts_dir)).get("greeting", "1.0")

        assert prompt.render() == "Hello, !"
