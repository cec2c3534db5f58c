"""
Pydantic Models

Defines the request, competitor summary and SEO report models, plus the
response envelopes returned to callers.
"""

from typing import Any, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

CompetitionLevel = Literal["Low", "Medium", "High"]

DEFAULT_DESCRIPTION = "Not provided"
DEFAULT_AUDIENCE = "General viewers"
DEFAULT_GEO = "Global"


class AnalysisRequest(BaseModel):
    """Content description submitted for analysis"""

    title: str = Field(..., min_length=1, max_length=255, description="Video title")
    description: Optional[str] = Field(default=None, description="Video description")
    audience: Optional[str] = Field(default=None, description="Target audience")
    geo: Optional[str] = Field(default=None, description="Target geography")

    def resolved_description(self) -> str:
        return self.description if self.description is not None else DEFAULT_DESCRIPTION

    def resolved_audience(self) -> str:
        return self.audience if self.audience is not None else DEFAULT_AUDIENCE

    def resolved_geo(self) -> str:
        return self.geo if self.geo is not None else DEFAULT_GEO


class CompetitorVideo(BaseModel):
    """A competing video with a positive view count"""

    title: str
    channel: str
    views: int = Field(ge=0)


class CompetitorSummary(BaseModel):
    """Aggregated competitor metrics for a search query"""

    competitors: List[CompetitorVideo] = Field(default_factory=list, max_length=10)
    average_views: int = Field(default=0, ge=0)
    competition_level: CompetitionLevel = "Low"


# SEO report returned by the completion provider.
# Unknown keys are ignored so extra model chatter does not fail validation.

class _ReportSection(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OptimizedMetadata(_ReportSection):
    optimized_title: str
    optimized_description: str
    tags: List[str]
    hashtags: List[str]
    suggested_upload_time: str


class KeywordResearch(_ReportSection):
    primary_keywords: List[str]
    secondary_keywords: List[str]
    search_intent: str
    competition_level: str
    volume_score: float


class ReportCompetitor(_ReportSection):
    title: str
    channel: str
    views: float


class CompetitorAnalysis(_ReportSection):
    top_competitors: List[ReportCompetitor]
    average_views: float
    competition_level: str
    common_keywords: List[str]


class ThumbnailOptimizer(_ReportSection):
    recommended_text: str
    color_theme: str
    font_style: str
    emotion: str
    ctr_boost_tips: List[str]


class SeoScoreBreakdown(_ReportSection):
    """Scores on the canonical integer 0-100 scale"""

    title_score: int = Field(ge=0, le=100)
    description_score: int = Field(ge=0, le=100)
    keyword_density_score: int = Field(ge=0, le=100)
    clickability_score: int = Field(ge=0, le=100)
    overall_score: int = Field(ge=0, le=100)
    feedback: List[str]


class TrendsAndTopics(_ReportSection):
    trending_topics: List[str]
    emerging_trends: List[str]
    recommended_upload_time: str


class TitleVariant(_ReportSection):
    title: str
    ctr_score: float


class TitleVariants(_ReportSection):
    variants: List[TitleVariant]


class SeoReport(_ReportSection):
    """Structured SEO analysis report"""

    optimized_metadata: OptimizedMetadata
    keyword_research: KeywordResearch
    competitor_analysis: CompetitorAnalysis
    thumbnail_optimizer: ThumbnailOptimizer
    seo_score_breakdown: SeoScoreBreakdown
    trends_and_topics: TrendsAndTopics
    title_variants: TitleVariants


# Response envelopes

class AnalysisSuccessResponse(BaseModel):
    """Successful analysis: report plus the competitor summary it was built from."""
    status: Literal["success"] = "success"
    data: SeoReport
    competitors: List[CompetitorVideo]
    average_views: int
    competition_level: CompetitionLevel


class AnalysisErrorResponse(BaseModel):
    """Single classified failure from one pipeline stage."""
    status: Literal["error"] = "error"
    error_type: str
    message: str
    raw: Optional[Any] = None
