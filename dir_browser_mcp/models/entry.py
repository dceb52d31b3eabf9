from pydantic import BaseModel, ConfigDict, Field, field_validator


class Entry(BaseModel):
    """One immediate child of a listed directory."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    path: str
    is_dir: bool  # True means the entry is a valid navigation target

    @field_validator("name")
    @classmethod
    def check_name_has_no_separator(cls, value: str) -> str:
        if "/" in value:
            raise ValueError(f"Entry name '{value}' must not contain a path separator.")
        return value
