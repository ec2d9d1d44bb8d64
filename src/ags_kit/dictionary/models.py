from pydantic import BaseModel, Field


class HeadingDetail(BaseModel):
    description: str = ""
    type: str = ""
    unit: str = ""
    status: str = ""
    example: str = ""

    class Config:
        extra = "forbid"


class Dictionary(BaseModel):
    """Read-only descriptions of group and heading codes.

    Every lookup tolerates absence and returns an empty description.
    """

    groups: dict[str, str] = Field(default_factory=dict)
    headings: dict[str, HeadingDetail] = Field(default_factory=dict)

    class Config:
        extra = "forbid"

    def group_description(self, code: str) -> str:
        return self.groups.get(code, "")

    def heading_description(self, code: str) -> str:
        detail = self.headings.get(code)
        return detail.description if detail else ""

    def heading_detail(self, code: str) -> HeadingDetail | None:
        return self.headings.get(code)

    def merged_with(self, overlay: "Dictionary") -> "Dictionary":
        """New dictionary with `overlay` entries taking precedence."""
        return Dictionary(
            groups={**self.groups, **overlay.groups},
            headings={**self.headings, **overlay.headings},
        )

    def is_empty(self) -> bool:
        return not self.groups and not self.headings
