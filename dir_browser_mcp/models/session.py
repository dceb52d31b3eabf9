from pydantic import BaseModel, ConfigDict, Field, model_validator


class History(BaseModel):
    """
    Visited locations plus a cursor, owned by a single Navigator.

    The current location is always `locations[cursor]`; it is never stored
    separately. `validate_assignment` re-checks the invariants whenever a
    field is reassigned, so a mutation that would break them is rejected.
    """

    model_config = ConfigDict(validate_assignment=True)

    locations: list[str] = Field(min_length=1)
    cursor: int = 0

    @model_validator(mode="after")
    def check_cursor_in_range(self) -> "History":
        if not 0 <= self.cursor < len(self.locations):
            raise ValueError(
                f"History cursor {self.cursor} is out of range for {len(self.locations)} locations."
            )
        return self

    @property
    def current(self) -> str:
        return self.locations[self.cursor]


class HistorySnapshot(BaseModel):
    """Read-only copy of a History for display."""

    model_config = ConfigDict(frozen=True)

    locations: tuple[str, ...]
    cursor: int

    @property
    def current(self) -> str:
        return self.locations[self.cursor]

    @property
    def can_go_back(self) -> bool:
        return self.cursor > 0

    @property
    def can_go_forward(self) -> bool:
        return self.cursor < len(self.locations) - 1
