"""Domain entities for catalog filtering."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FilterState:
    """Current search/filter selection. Empty strings act as wildcards."""

    search: str = ""
    category: str = ""
    region: str = ""
    robot_type: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.search or self.category or self.region or self.robot_type)


@dataclass(frozen=True)
class FilterOptions:
    """Selectable values derived from the cases currently loaded."""

    categories: list[str] = field(default_factory=list)
    regions: list[str] = field(default_factory=list)
    robot_types: list[str] = field(default_factory=list)
