"""Score a resume from the command line.

Usage:
    resume-ats --resume resume.txt [--jd job.txt] [--resume-data resume.json]
    resume-ats --resume resume.pdf --filename Jane_Doe_Resume.pdf
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from config import settings
from models.schemas import ResumeData
from services import pdf_parser, resume_analyzer

logger = logging.getLogger(__name__)


def _read_resume_text(path: Path) -> str:
    if path.suffix.lower() == ".pdf":
        return pdf_parser.extract_text(path.read_bytes())
    return path.read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Deterministic ATS resume scoring")
    parser.add_argument("--resume", required=True, help="Resume as a .pdf or plain text file")
    parser.add_argument("--resume-data", help="JSON file with structured resume fields")
    parser.add_argument("--jd", help="Plain text job description file")
    parser.add_argument("--filename", help="Filename to judge (defaults to the resume path name)")
    parser.add_argument("--local", action="store_true", help="Skip Gemini normalization")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(message)s")
    if args.local:
        settings.llm_normalization = False

    resume_path = Path(args.resume)
    try:
        resume_text = _read_resume_text(resume_path)
    except pdf_parser.ExtractionError as e:
        logger.error("Text extraction failed: %s", e)
        return 2

    resume_data = None
    if args.resume_data:
        raw = json.loads(Path(args.resume_data).read_text(encoding="utf-8"))
        resume_data = ResumeData.model_validate(raw)

    job_description = Path(args.jd).read_text(encoding="utf-8") if args.jd else None

    report = asyncio.run(resume_analyzer.score_resume(
        resume_text,
        job_description,
        resume_data=resume_data,
        filename=args.filename or resume_path.name,
    ))
    print(report.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
