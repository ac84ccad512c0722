"""Pydantic schemas for explained reports."""

from pydantic import BaseModel


class GroupExplanation(BaseModel):
    raw_group: str
    explanation: str


class ReportExplanation(BaseModel):
    """Everything decoded from one report.

    ``groups`` lines up one-to-one, in order, with the groups the parser
    produced.  ``error`` is empty when the report parsed cleanly.
    """
    report_type: str
    error: str = ""
    location: str = ""
    timestamp: str = ""
    is_speci: bool = False
    is_automated: bool = False
    is_nil: bool = False
    is_cancelled: bool = False
    is_amended: bool = False
    is_correctional: bool = False
    groups: list[GroupExplanation] = []

    @property
    def explanations(self) -> list[str]:
        return [g.explanation for g in self.groups]


class ExplainRequest(BaseModel):
    report: str
