"""Domain exceptions for the furniture constraint engine."""


class ConstraintTableError(Exception):
    """Raised when the static constraint data is incoherent.

    This is a data defect, not a runtime condition: a family table that
    admits no column count for reachable dimensions, a configuration type
    without metadata, or a template whose zone proportions do not sum
    to 100. Callers should not try to recover from it.
    """

    pass


class TemplateNotFoundError(Exception):
    """Raised when a template id is not part of a family's catalogue."""

    def __init__(self, template_id: str, family: str) -> None:
        self.template_id = template_id
        self.family = family
        super().__init__(f"Template '{template_id}' not found for family '{family}'")
