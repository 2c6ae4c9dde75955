from models.schemas.base import CamelModel
from models.schemas.keywords import KeywordAnalysis
from models.schemas.sections import SectionAnalysis


class AnalysisDetails(CamelModel):
    section_analysis: list[SectionAnalysis] = []
    keyword_analysis: KeywordAnalysis = KeywordAnalysis()
    action_verb_count: int = 0
    content_length: int = 0  # characters in the normalized text
    word_count: int = 0


class CVAnalysisResult(CamelModel):
    """The report stored against a CV and rendered by the dashboard."""
    overall_score: int = 0
    sections: list[str] = []
    issues: list[str] = []
    recommendations: list[str] = []
    details: AnalysisDetails = AnalysisDetails()


class AnalyzeResponse(CamelModel):
    industry: str
    result: CVAnalysisResult


class IndustryInfo(CamelModel):
    key: str
    label: str
    term_count: int


class HealthResponse(CamelModel):
    status: str = "ok"
    industries: int = 0
