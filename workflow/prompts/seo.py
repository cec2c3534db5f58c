"""
SEO Analysis Prompts

Prompt templates for the YouTube SEO report.
"""

import json

from models import AnalysisRequest, CompetitorSummary

OUTPUT_RULES = """IMPORTANT RULES (STRICT):
- Fill EVERY field in the JSON
- NEVER leave strings empty
- NEVER omit any array items
- If data is missing, intelligently INFER it
- Assume this is a YouTube Shorts video
- Be SEO-focused, practical, and realistic
- Output ONLY valid JSON (no markdown, no text)"""

HASHTAG_RULES = """HASHTAG RULES (VERY IMPORTANT):
- Provide AT LEAST 12-20 hashtags
- Mix broad + niche + trending hashtags
- Include:
  - primary keyword hashtags
  - secondary keyword hashtags
  - Shorts-related hashtags (#shorts, #ytshorts, etc.)
  - engagement hashtags (#viral, #trending, etc.)
- Hashtags must be lowercase and without spaces
- Do NOT repeat the same hashtag"""

SCORING_RULES = """SCORING RULES:
- All SEO scores MUST be integers between 0 and 100
- 0-20 = very poor
- 21-40 = poor
- 41-60 = average
- 61-80 = good
- 81-100 = excellent
- Overall score MUST be a weighted average of the other scores
- Do NOT give the same score to all fields

CTR RULES:
- ctr_score MUST be an integer between 0 and 100
- Higher CTR means more click-worthy titles
- Be consistent across all title variants"""

REPORT_SCHEMA = """{
  "optimized_metadata": {
    "optimized_title": string,
    "optimized_description": string,
    "tags": [string],
    "hashtags": [string],
    "suggested_upload_time": string
  },
  "keyword_research": {
    "primary_keywords": [string],
    "secondary_keywords": [string],
    "search_intent": "Informational | Commercial | Trending | Entertainment",
    "competition_level": "Low | Medium | High",
    "volume_score": number
  },
  "competitor_analysis": {
    "top_competitors": [
      { "title": string, "channel": string, "views": number }
    ],
    "average_views": number,
    "competition_level": string,
    "common_keywords": [string]
  },
  "thumbnail_optimizer": {
    "recommended_text": string,
    "color_theme": string,
    "font_style": string,
    "emotion": string,
    "ctr_boost_tips": [string]
  },
  "seo_score_breakdown": {
    "title_score": number,
    "description_score": number,
    "keyword_density_score": number,
    "clickability_score": number,
    "overall_score": number,
    "feedback": [string]
  },
  "trends_and_topics": {
    "trending_topics": [string],
    "emerging_trends": [string],
    "recommended_upload_time": string
  },
  "title_variants": {
    "variants": [
      { "title": string, "ctr_score": number }
    ]
  }
}"""


def build_seo_analysis_prompt(request: AnalysisRequest, summary: CompetitorSummary) -> str:
    """
    Build the SEO report prompt with real competitor data.

    The output depends only on its arguments, so identical inputs always
    produce an identical prompt.

    Args:
        request: Analysis request (missing optional fields are defaulted)
        summary: Competitor summary from the search provider

    Returns:
        Formatted prompt string
    """
    competitors_json = json.dumps(
        [c.model_dump() for c in summary.competitors],
        indent=4,
        ensure_ascii=False,
    )

    return f"""{OUTPUT_RULES}

{HASHTAG_RULES}

{SCORING_RULES}

You are an expert YouTube SEO strategist.

REAL competitor data from YouTube:
{competitors_json}

Average Views: {summary.average_views}
Competition Level: {summary.competition_level}

Video Information:
Title: {request.title}
Description: {request.resolved_description()}
Audience: {request.resolved_audience()}
Geo: {request.resolved_geo()}

Generate COMPLETE values for the following JSON structure:

{REPORT_SCHEMA}
"""
