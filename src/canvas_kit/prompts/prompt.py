from pydantic import BaseModel, ConfigDict, Field


class _BlankMissing(dict):
    def __missing__(self, key: str) -> str:
        return ""


class Prompt(BaseModel):
    name: str
    version: str
    description: str
    inputs: dict[str, str]
    template: str
    # Fallback values for inputs the caller leaves empty
    defaults: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    def render(self, **values: str | None) -> str:
        """Fill `{placeholder}` fields. Empty inputs use `defaults`, then ""."""
        filled = dict(self.defaults)
        filled.update({key: value for key, value in values.items() if value})
        return self.template.format_map(_BlankMissing(filled))
