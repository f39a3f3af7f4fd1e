"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class AdminAccessRequiredError(Exception):
    """Raised when a mutating action is attempted outside admin mode."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Admin mode is required to {action}")
