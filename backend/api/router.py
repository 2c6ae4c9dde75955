from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import AnalyzeRequest
from models.responses import AnalyzeResponse, HealthResponse, IndustryInfo
from services.cv_analyzer import analyze_cv_content
from services.lexicon import INDUSTRY_KEYWORDS, list_industries, resolve_industry

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", industries=len(INDUSTRY_KEYWORDS))


@router.get("/industries", response_model=list[IndustryInfo])
async def industries():
    return [
        IndustryInfo(key=key, label=label, term_count=count)
        for key, label, count in list_industries()
    ]


@router.post("/analyze", response_model=AnalyzeResponse)
@limiter.limit(settings.analyze_rate_limit)
def analyze(request: Request, body: AnalyzeRequest):
    # CPU-bound; a sync handler keeps it off the event loop
    industry = resolve_industry(body.industry or settings.default_industry)
    result = analyze_cv_content(body.text, industry)
    return AnalyzeResponse(industry=industry, result=result)
