"""Questionnaire template endpoints."""

from fastapi import APIRouter, HTTPException, status

from assessment_hub.schemas.template import TemplateRead, TemplateSummary
from assessment_hub.scoring.registry import TemplateNotFoundError, get_template, list_templates

router = APIRouter()


@router.get(
    "",
    response_model=list[TemplateSummary],
    summary="List assessment templates",
)
async def get_templates() -> list[TemplateSummary]:
    """List all available assessment types in display order."""
    return [TemplateSummary.model_validate(t) for t in list_templates()]


@router.get(
    "/{type_id}",
    response_model=TemplateRead,
    summary="Get assessment template",
)
async def get_template_detail(type_id: str) -> TemplateRead:
    """Get a template with its ordered questions and options."""
    try:
        template = get_template(type_id)
    except TemplateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return TemplateRead.model_validate(template)
