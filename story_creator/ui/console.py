import argparse
import logging
import sys
from typing import List, Optional, Sequence

from story_creator.core.models import Genre, StoryState
from story_creator.core.settings import settings
from story_creator.services.story_engine import StoryEngine

logger = logging.getLogger(__name__)

RULE = "=" * 42

def display_state(state: StoryState) -> None:
    """Print the current segment, then the choices or the end banner."""
    print(f"\n{RULE}")
    print(state.current_text)
    print(RULE)

    if state.choices:
        print("What do you do next?")
        for i, choice in enumerate(state.choices, start=1):
            print(f"{i}. {choice}")
    else:
        print("\n--- THE END ---")

def select_genre() -> Genre:
    members = list(Genre)
    while True:
        print("Choose your adventure's genre:")
        for i, genre in enumerate(members, start=1):
            print(f"{i}. {genre}")
        try:
            return Genre.from_menu(input("> "))
        except ValueError:
            print(f"Invalid selection. Please enter a number between 1 and {len(members)}.")

def get_user_choice(choices: Sequence[str]) -> str:
    if not choices:
        raise RuntimeError("Cannot get user choice when no choices are available.")

    while True:
        raw = input("> ").strip()
        try:
            index = int(raw)
        except ValueError:
            index = 0
        if 1 <= index <= len(choices):
            return choices[index - 1]
        print(f"Invalid input. Please enter a number between 1 and {len(choices)}.")

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive choice-based story generator.")
    parser.add_argument("--model", help="Chat-completion model id (default from settings)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)
    if args.model:
        settings.ai_model = args.model

    engine = StoryEngine()

    print("Welcome to the Interactive Story Generator!")
    try:
        state = engine.initialize(select_genre())
        while not state.is_finished:
            display_state(state)
            state = engine.advance(state, get_user_choice(state.choices))
    except (EOFError, KeyboardInterrupt):
        print("\nExiting.")
        return 0

    display_state(state)
    return 0

if __name__ == "__main__":
    sys.exit(main())
