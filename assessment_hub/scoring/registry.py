"""Assessment template registry.

Process-wide, read-only lookup of questionnaire definitions by type id.
Built once at import time from the instrument modules.
"""

from assessment_hub.scoring import bai, bdi2, gad7, pcl5, phq9
from assessment_hub.scoring.base import AssessmentTemplate


class TemplateNotFoundError(Exception):
    """Raised when an assessment type has no registered template."""

    def __init__(self, type_id: str) -> None:
        self.type_id = type_id
        super().__init__(f"Assessment type {type_id} not found")


# Registration order is the display order
_TEMPLATES: dict[str, AssessmentTemplate] = {
    module.TEMPLATE.type_id: module.TEMPLATE
    for module in (phq9, gad7, bdi2, bai, pcl5)
}


def get_template(type_id: str) -> AssessmentTemplate:
    """Look up a template by type id.

    Raises:
        TemplateNotFoundError: If the type id is not registered.
    """
    template = _TEMPLATES.get(type_id)
    if template is None:
        raise TemplateNotFoundError(type_id)
    return template


def find_template(type_id: str) -> AssessmentTemplate | None:
    """Look up a template by type id, returning None on a miss."""
    return _TEMPLATES.get(type_id)


def is_registered(type_id: str) -> bool:
    return type_id in _TEMPLATES


def list_templates() -> list[AssessmentTemplate]:
    """Return all templates in registration order."""
    return list(_TEMPLATES.values())
