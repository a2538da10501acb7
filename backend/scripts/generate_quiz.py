#!/usr/bin/env python3
"""Generate a multiple-choice quiz from a free-text prompt.

Usage:
    python scripts/generate_quiz.py "5 questions about the solar system"
    python scripts/generate_quiz.py "Create a test about WWII" --provider openai --output wwii.json
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from quizgen.clients.ai import PROVIDERS, AIClient
from quizgen.config import AIClientConfig, settings
from quizgen.errors import ConfigError, QuizGenerationError
from quizgen.models.quiz import Quiz
from quizgen.services.quiz_generator import QuizGenerator


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Generate a multiple-choice quiz using AI")
    parser.add_argument("prompt", help="Free-text request, e.g. '5 questions about the solar system'")
    parser.add_argument("--provider", choices=list(PROVIDERS), help="AI provider (default: AI_PROVIDER setting)")
    parser.add_argument("--output", type=Path, help="Write the quiz JSON to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


async def run(prompt: str, provider: str | None = None) -> Quiz:
    """Build a client from settings and generate one quiz."""
    async with AIClient(AIClientConfig.from_settings(settings, provider)) as ai_client:
        return await QuizGenerator(ai_client).generate_quiz(prompt)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        quiz = asyncio.run(run(args.prompt, args.provider))
    except (ConfigError, QuizGenerationError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    output = json.dumps(quiz.model_dump(by_alias=True), indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Saved {len(quiz.questions)} questions to {args.output}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
