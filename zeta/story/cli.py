"""
Story CLI - terminal front end for the story flow.

Commands:
- wizard: interactive questionnaire, preview, and story generation
- run: non-interactive generation from command-line answers
- catalogs: list every question and its options
"""

import argparse
import asyncio
import logging
import sys
from typing import Callable, List, Optional

from zeta.infra.config import load_environment
from zeta.infra.logging_config import setup_logging

from .api_client import GeminiClient
from .coordinator import StoryCoordinator
from .errors import WizardError
from .models import AnswerSet
from .prompt_builder import build_story_prompt, summarize_answers
from .steps import STEP_COPY, Step, catalog_for_step, is_question_step
from .template_loader import load_prompt_template

logger = logging.getLogger(__name__)

BACK_COMMANDS = {"b", "back"}
QUIT_COMMANDS = {"q", "quit"}
CLEAR_NAME = "-"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Bedtime Story CLI")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("wizard", help="Create a story step by step")

    run_parser = subparsers.add_parser("run", help="Generate a story from answers given as options")
    run_parser.add_argument("--character", required=True, help="Main character id (e.g. 'animal')")
    run_parser.add_argument("--name", default=None, help="Optional hero name")
    run_parser.add_argument("--setting", required=True, help="Setting id (e.g. 'forest')")
    run_parser.add_argument("--helper", required=True, help="Helper id (e.g. 'fairy_godparent')")
    run_parser.add_argument("--challenge", required=True, help="Challenge id (e.g. 'finding_something_lost')")
    run_parser.add_argument("--magic", required=True, help="Magical element id (e.g. 'flying')")
    run_parser.add_argument("--ending", required=True, help="Ending id (e.g. 'peaceful_sleep')")
    run_parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Print the assembled prompt without calling the API"
    )

    subparsers.add_parser("catalogs", help="List questions and their options")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "catalogs":
        print_catalogs()
        return 0

    config = load_environment()
    setup_logging(config["log_level"])
    client = GeminiClient.from_config(config)
    template = load_prompt_template(config["template_path"])

    if args.command == "run":
        return run_from_args(args, client, template)

    coordinator = StoryCoordinator(client, template=template)
    return run_wizard(coordinator)


def print_catalogs(output: Callable[[str], None] = print) -> None:
    """Print each question step with its options."""
    for step in Step:
        if not is_question_step(step):
            continue
        output(f"[{step.value}] {STEP_COPY[step].heading}")
        for entry in catalog_for_step(step).values():
            line = f"  {entry.id:<30} {entry.label}"
            if entry.description:
                line += f" - {entry.description}"
            output(line)
        output("")


async def _generate(coordinator: StoryCoordinator) -> None:
    task = coordinator.generate()
    if task is not None:
        await task


def run_from_args(args: argparse.Namespace, client: GeminiClient, template: Optional[dict] = None) -> int:
    """Execute non-interactive generation based on args."""
    answers = AnswerSet(
        main_character_id=args.character,
        character_name=args.name,
        setting_id=args.setting,
        helper_id=args.helper,
        challenge_id=args.challenge,
        magical_element_id=args.magic,
        ending_id=args.ending,
    )

    try:
        coordinator = StoryCoordinator.for_answers(answers, client, template=template)
    except WizardError as e:
        print(f"Invalid answers: {e}", file=sys.stderr)
        return 1

    if args.dry_run:
        print(build_story_prompt(coordinator.answers, template=template))
        return 0

    logger.info("[CLI] Story generation started")
    asyncio.run(_generate(coordinator))

    print(coordinator.display_text)
    return 0 if coordinator.result and coordinator.result.success else 1


def _ask_question(
    coordinator: StoryCoordinator,
    input_fn: Callable[[str], str],
    output: Callable[[str], None],
) -> bool:
    """Handle one question step. Returns False when the user quits."""
    step = coordinator.step
    options = list(coordinator.catalog().values())
    current = coordinator.answer_for(step)

    output("")
    output(STEP_COPY[step].heading)
    for index, entry in enumerate(options, 1):
        marker = "*" if entry.id == current else " "
        line = f" {marker}{index}. {entry.label}"
        if entry.description:
            line += f" - {entry.description}"
        output(line)

    choice = input_fn("Choose a number ([b]ack, [q]uit): ").strip().lower()
    if choice in QUIT_COMMANDS:
        return False
    if choice in BACK_COMMANDS:
        coordinator.retreat()
        return True

    selection = current if not choice else None
    if choice.isdigit() and 1 <= int(choice) <= len(options):
        selection = options[int(choice) - 1].id
    elif choice in coordinator.catalog():
        selection = choice

    if selection is None:
        output("Please pick one of the listed options.")
        return True

    name = None
    if step == Step.CHARACTER:
        previous_name = coordinator.answers.character_name or ""
        if previous_name:
            prompt = f"Character's name (optional, - to clear) [{previous_name}]: "
        else:
            prompt = "Character's name (optional): "
        name = input_fn(prompt).strip() or previous_name
        if name == CLEAR_NAME:
            name = None

    try:
        coordinator.advance(selection, character_name=name)
    except WizardError as e:
        output(str(e))
    return True


def _show_preview(
    coordinator: StoryCoordinator,
    input_fn: Callable[[str], str],
    output: Callable[[str], None],
) -> bool:
    """Handle the preview step. Returns False when the user quits."""
    copy = STEP_COPY[Step.PREVIEW]
    output("")
    output(copy.heading)
    for label, value in summarize_answers(coordinator.answers):
        output(f"  {label:<10} {value}")

    choice = input_fn(f"[g] {copy.action}  [b]ack  [q]uit: ").strip().lower()
    if choice in QUIT_COMMANDS:
        return False
    if choice in BACK_COMMANDS:
        coordinator.retreat()
        return True
    if choice in {"g", "generate", ""}:
        output(STEP_COPY[Step.DISPLAY].loading)
        asyncio.run(_generate(coordinator))
    return True


def run_wizard(
    coordinator: StoryCoordinator,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> int:
    """
    Walk the user through the questionnaire and print the story.

    Returns:
        int: 0 when a story was shown, 1 otherwise
    """
    while not coordinator.exited:
        step = coordinator.step

        if is_question_step(step):
            if not _ask_question(coordinator, input_fn, output):
                return 1
        elif step == Step.PREVIEW:
            if not _show_preview(coordinator, input_fn, output):
                return 1
        else:
            copy = STEP_COPY[Step.DISPLAY]
            success = bool(coordinator.result and coordinator.result.success)
            output("")
            output(copy.heading)
            output(coordinator.display_text)
            input_fn(f"{copy.action} (press Enter) ")
            coordinator.done()
            return 0 if success else 1

    output("Story creation cancelled.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
