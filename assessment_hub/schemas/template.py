"""Pydantic schemas for questionnaire templates."""

from pydantic import BaseModel


class OptionRead(BaseModel):
    value: int
    label: str

    model_config = {"from_attributes": True}


class QuestionRead(BaseModel):
    id: int
    text: str
    options: list[OptionRead]

    model_config = {"from_attributes": True}


class TemplateSummary(BaseModel):
    """Template metadata without questions."""

    type_id: str
    display_name: str
    full_name: str
    description: str
    category: str
    time_estimate: str
    max_score: int

    model_config = {"from_attributes": True}


class TemplateRead(TemplateSummary):
    """Full template with ordered questions and options."""

    questions: list[QuestionRead]
