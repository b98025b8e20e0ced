DEFAULT_GROCERY_DESCRIPTION = "No Description"


def normalize_grocery_description(value: str | None) -> str:
    if not value:
        return DEFAULT_GROCERY_DESCRIPTION
    return value


def _non_negative(value) -> float:
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        return 0.0
    # NaN compares False against everything; treat it as zero as well.
    if not number >= 0:
        return 0.0
    return number


def normalize_cost(value) -> float:
    """Negative or unusable costs become 0."""
    return _non_negative(value)


def normalize_units(value) -> float:
    """Negative or unusable unit counts become 0."""
    return _non_negative(value)


class GroceryType:
    """A grocery that can be put on a list, with its unit price."""

    def __init__(self, description: str | None = "", cost: float = 0.0):
        self.description = description
        self.cost = cost

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str | None) -> None:
        self._description = normalize_grocery_description(value)

    @property
    def cost(self) -> float:
        return self._cost

    @cost.setter
    def cost(self, value: float) -> None:
        self._cost = normalize_cost(value)

    def to_dict(self) -> dict:
        return {"Description": self.description, "Cost": self.cost}

    @classmethod
    def from_dict(cls, data: dict) -> "GroceryType":
        return cls(data.get("Description"), data.get("Cost", 0))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


class GroceryItem(GroceryType):
    """A line on a grocery list: a grocery type plus how many units to buy."""

    def __init__(self, description: str | None = "", cost: float = 0.0, units: float = 0.0):
        super().__init__(description, cost)
        self.units = units

    @property
    def units(self) -> float:
        return self._units

    @units.setter
    def units(self, value: float) -> None:
        self._units = normalize_units(value)

    @property
    def total_cost(self) -> float:
        return normalize_cost(self.cost * self.units)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["NoOfUnits"] = self.units
        data["TotalCost"] = self.total_cost
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "GroceryItem":
        # TotalCost is derived; whatever the file says is ignored.
        return cls(data.get("Description"), data.get("Cost", 0), data.get("NoOfUnits", 0))
