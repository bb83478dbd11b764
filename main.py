"""CLI entry point for resume-fit."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from resume_fit.core.config import Settings
from resume_fit.core.errors import InputError
from resume_fit.core.schemas import JobDescription


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Match a resume against a job description and suggest improvements",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- parse-resume ---
    resume_parser = subparsers.add_parser("parse-resume", help="Extract fields from a resume")
    resume_parser.add_argument("--file", required=True, help="Resume file (pdf, docx, txt)")

    # --- parse-job ---
    job_parser = subparsers.add_parser("parse-job", help="Extract fields from a job description")
    job_source = job_parser.add_mutually_exclusive_group(required=True)
    job_source.add_argument("--file", help="Job description file (pdf, docx, txt)")
    job_source.add_argument("--url", help="Job posting URL")
    job_source.add_argument("--text", help="Job description text")

    # --- analyze ---
    analyze_parser = subparsers.add_parser("analyze", help="Score a resume against a job")
    analyze_parser.add_argument("--resume", required=True, help="Resume file (pdf, docx, txt)")
    analyze_job = analyze_parser.add_mutually_exclusive_group(required=True)
    analyze_job.add_argument("--job", help="Job description file (pdf, docx, txt)")
    analyze_job.add_argument("--job-url", help="Job posting URL")
    analyze_parser.add_argument(
        "--user-key",
        help="Your own API key for the secondary provider",
    )

    for sub in (resume_parser, job_parser, analyze_parser):
        sub.add_argument(
            "--config",
            help="Path to settings YAML file (default: $RESUME_FIT_CONFIG or config/settings.yaml)",
        )
        sub.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Enable verbose (DEBUG) logging",
        )

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _print_json(data: dict[str, Any]) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _load_job(settings: Settings, *, file: str | None, url: str | None, text: str | None) -> JobDescription:
    from resume_fit.api import extract_job_data
    from resume_fit.parsing.documents import extract_text
    from resume_fit.parsing.scraper import fetch_job_description

    if url:
        return extract_job_data(fetch_job_description(url, settings.fetch), source_url=url)
    if file:
        return extract_job_data(extract_text(Path(file)))
    return extract_job_data(text or "")


def cmd_parse_resume(args: argparse.Namespace, settings: Settings) -> None:
    """Handle parse-resume subcommand."""
    from resume_fit.api import extract_resume_data
    from resume_fit.parsing.documents import extract_text

    resume = extract_resume_data(extract_text(args.file))
    _print_json(resume.model_dump(mode="json", by_alias=True))


def cmd_parse_job(args: argparse.Namespace, settings: Settings) -> None:
    """Handle parse-job subcommand."""
    job = _load_job(settings, file=args.file, url=args.url, text=args.text)
    _print_json(job.model_dump(mode="json", by_alias=True))


def cmd_analyze(args: argparse.Namespace, settings: Settings) -> None:
    """Handle analyze subcommand."""
    from resume_fit.api import analyze_resume_vs_job, analyze_with_user_key, extract_resume_data
    from resume_fit.parsing.documents import extract_text
    from resume_fit.pipeline.orchestrator import Analyzer

    resume = extract_resume_data(extract_text(args.resume))
    job = _load_job(settings, file=args.job, url=args.job_url, text=None)

    analyzer = Analyzer.from_settings(settings)
    if args.user_key:
        result = analyze_with_user_key(resume, job, args.user_key, analyzer=analyzer)
    else:
        result = analyze_resume_vs_job(resume, job, analyzer=analyzer)
    _print_json(result.model_dump(mode="json", by_alias=True))


_COMMANDS = {
    "parse-resume": cmd_parse_resume,
    "parse-job": cmd_parse_job,
    "analyze": cmd_analyze,
}


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = Settings.load(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        _COMMANDS[args.command](args, settings)
    except (FileNotFoundError, ImportError, InputError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
