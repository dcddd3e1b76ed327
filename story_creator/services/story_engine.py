import logging
from dataclasses import replace
from typing import Dict

from story_creator.core.models import Genre, Stage, StoryState
from story_creator.core.prompts import build_prompt
from story_creator.services.ai_client import AIClient, ai_client

logger = logging.getLogger(__name__)

_NEXT_STAGE: Dict[Stage, Stage] = {
    Stage.INTRODUCTION: Stage.ACTION_CONFLICT,
    Stage.ACTION_CONFLICT: Stage.AMBIGUITY_MYSTERY,
    Stage.AMBIGUITY_MYSTERY: Stage.CLIMAX_RESOLUTION,
    Stage.CLIMAX_RESOLUTION: Stage.END,
    Stage.END: Stage.END,
}

def next_stage(stage: Stage) -> Stage:
    return _NEXT_STAGE[stage]

class StoryEngine:
    """
    Story state machine. Holds no session state itself: every call takes
    a StoryState and returns a new one.
    """

    def __init__(self, client: AIClient = ai_client):
        self.client = client

    def initialize(self, genre: Genre) -> StoryState:
        state = StoryState(genre=genre, current_stage=Stage.INTRODUCTION)
        segment, choices = self.client.generate(build_prompt(state))
        logger.info("Story started (genre=%s)", genre)
        return replace(
            state,
            history=(segment,),
            current_text=segment,
            choices=tuple(choices),
        )

    def advance(self, state: StoryState, user_choice: str) -> StoryState:
        if state.current_stage is Stage.END:
            return state

        target = next_stage(state.current_stage)
        # prompt describes the stage being entered
        prompt = build_prompt(replace(state, current_stage=target), user_choice)
        segment, choices = self.client.generate(prompt)

        new_state = replace(
            state,
            current_stage=target,
            history=state.history + (segment,),
            current_text=segment,
            choices=() if target is Stage.END else tuple(choices[:2]),
        )
        logger.info("Advanced to %s (history=%d)", target, len(new_state.history))
        return new_state
