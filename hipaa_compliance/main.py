"""
HIPAA Compliance Assessment — Main Entry Point

Evaluate a saved questionnaire (CLI):
    python -m hipaa_compliance answers.json

Run as an API server:
    python -m hipaa_compliance --serve
    # or: uvicorn hipaa_compliance.api:app --reload --port 8000

Or import and run programmatically:
    from hipaa_compliance.main import run
    result = run("path/to/answers.json")
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from hipaa_compliance.config import get_settings
from hipaa_compliance.engine import evaluate
from hipaa_compliance.models.schemas import AssessmentResult
from hipaa_compliance.utils.logger import setup_logging


def run(answers_path: str = "") -> AssessmentResult:
    """Evaluate the answers file (or an empty AnswerSet) and return the result."""
    setup_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)

    answers: dict = {}
    if answers_path:
        path = Path(answers_path)
        if not path.exists():
            raise FileNotFoundError(f"Answers file not found: {path}")
        answers = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(answers, dict):
            raise ValueError(f"{path}: answers must be a JSON object")
        logger.info(f"Loaded {len(answers)} answers from {path.name}")

    result = evaluate(answers)
    _print_summary(result)
    return result


def _print_summary(result: AssessmentResult) -> None:
    """Log a human-readable summary of the assessment."""
    logger = logging.getLogger(__name__)

    logger.info("-" * 60)
    logger.info("  ASSESSMENT SUMMARY")
    logger.info("-" * 60)
    logger.info(f"  Catalog:        {result.catalog_version}")
    logger.info(f"  Score:          {result.initial_score}/100")
    logger.info(f"  Risk Level:     {result.risk_level.value.upper()}")
    logger.info(f"  Requirements:   {len(result.applicable_requirements)} applicable")
    logger.info(f"  Gaps:           {result.gap_count}")
    for gap in result.compliance_gaps:
        logger.info(f"    P{gap.effective_priority.value} | {gap.clause.code} | {gap.gap_description}")
    logger.info("  Recommended actions:")
    for idx, action in enumerate(result.recommended_actions, start=1):
        logger.info(f"    {idx}. {action}")
    logger.info("-" * 60)


def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    host = host or settings.api_host
    port = port or settings.api_port
    logging.getLogger(__name__).info(f"Starting API server on {host}:{port}")
    uvicorn.run("hipaa_compliance.api:app", host=host, port=port, reload=settings.debug)


def cli() -> None:
    """Console entry point: `hipaa-compliance answers.json` or `hipaa-compliance --serve`."""
    if "--serve" in sys.argv:
        serve()
    else:
        file_arg = sys.argv[1] if len(sys.argv) > 1 else ""
        print(run(file_arg).model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
