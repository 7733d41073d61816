"""Host-side orchestration around the scoring engine.

Pipeline:
1. Normalize the resume into ResumeData
   - caller-supplied fields are used as-is
   - otherwise Gemini (when configured), falling back to the rule-based parser
2. Run the deterministic scoring engine
3. Record which normalization path was taken
"""

import logging

from pydantic import ValidationError

from config import settings
from models.responses import ScoreReport
from models.schemas import ResumeData
from services import gemini_client, prompt_builder, resume_parser
from services.scoring.engine import evaluate
from services.scoring.rubric import rubric_from_settings

logger = logging.getLogger(__name__)


async def normalize_resume(resume_text: str) -> tuple[ResumeData, str]:
    """Return (resume_data, method) where method is "llm" or "local"."""
    if settings.llm_normalization and settings.gemini_api_key:
        prompt = prompt_builder.build_normalization_prompt(resume_text)
        data = await gemini_client.generate_json(prompt)
        if data is not None:
            try:
                return ResumeData.model_validate(data), "llm"
            except ValidationError as e:
                logger.warning("Gemini output failed validation, using local parser: %s", e)
        else:
            logger.warning("Gemini normalization unavailable, using local parser")

    return resume_parser.parse_resume(resume_text), "local"


async def score_resume(
    resume_text: str,
    job_description: str | None = None,
    resume_data: ResumeData | None = None,
    filename: str | None = None,
) -> ScoreReport:
    """Normalize (if needed) and score a resume."""
    if resume_data is not None:
        method = "provided"
    else:
        resume_data, method = await normalize_resume(resume_text)

    report = evaluate(
        resume_text,
        resume_data,
        job_description,
        filename=filename,
        rubric=rubric_from_settings(settings),
    )
    return report.model_copy(update={"normalization_method": method})
