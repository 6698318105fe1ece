"""Gear checklist data model."""

from pydantic import BaseModel, Field


class GearItem(BaseModel):
    """A single checklist entry."""

    name: str = Field(..., description="Item name")
    category: str = Field(..., description="Footwear, Clothing, Equipment, ...")
    recommended: bool = Field(default=False)
    checked: bool = Field(default=False)


class GearChecklist(BaseModel):
    """Gear list for a race."""

    items: list[GearItem] = Field(default_factory=list)

    def by_category(self) -> dict[str, list[GearItem]]:
        """Group items by category, preserving list order."""
        grouped: dict[str, list[GearItem]] = {}
        for item in self.items:
            grouped.setdefault(item.category, []).append(item)
        return grouped

    @property
    def recommended_items(self) -> list[GearItem]:
        return [item for item in self.items if item.recommended]

    def add_item(self, name: str, category: str = "Equipment") -> GearItem | None:
        """
        Add a custom item, checked but not recommended.

        Args:
            name: Item name (surrounding whitespace is stripped)
            category: Checklist category

        Returns:
            The new item, or None if the name is blank
        """
        name = name.strip()
        if not name:
            return None
        item = GearItem(name=name, category=category, recommended=False, checked=True)
        self.items.append(item)
        return item

    def remove_item(self, name: str) -> bool:
        """Remove the named item. Returns False if it was not on the list."""
        remaining = [item for item in self.items if item.name != name]
        removed = len(remaining) != len(self.items)
        self.items = remaining
        return removed

    def toggle(self, name: str) -> GearItem | None:
        """Flip the checked state of the named item."""
        for item in self.items:
            if item.name == name:
                item.checked = not item.checked
                return item
        return None
