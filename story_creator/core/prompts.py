from typing import Dict, Optional

from .models import Stage, StoryState

# ——— Prompt text ———————————————————————————————————————

SYSTEM_PROMPT = (
    "You are an interactive storytelling AI. "
    "Create engaging, concise story segments with 2 distinct choices for the user."
)

# Narrative tone per stage. A new Stage needs an entry here.
STAGE_GOALS: Dict[Stage, str] = {
    Stage.INTRODUCTION: "Start the story with an introduction.",
    Stage.ACTION_CONFLICT: "Focus on rising action and conflict.",
    Stage.AMBIGUITY_MYSTERY: "Introduce an element of ambiguity or mystery.",
    Stage.CLIMAX_RESOLUTION: "Build towards the climax and resolution.",
    Stage.END: "Provide a concluding paragraph and resolution. Offer no choices.",
}

BEGINNING_CONTEXT = "This is the beginning of the story."
LENGTH_INSTRUCTION = "Keep the story segment concise (1-2 sentences)."
CHOICES_INSTRUCTION = (
    "Provide exactly 2 short, distinct choices for actions the user "
    "might be able to do based on the segment."
)

# Biases the model toward the layout parse_response() understands.
EXAMPLE_OUTPUT = (
    "Example Output Structure:\n"
    "As Captain Vey's ship, the Celestial Horizon, descended onto the frozen moon...\n"
    "Option 1: You go with the captain.\n"
    "Option 2: You let them leave without you.\n"
)

# ——— Prompt assembly ——————————————————————————————————

def build_prompt(state: StoryState, user_choice: Optional[str] = None) -> str:
    """
    Build the user message for the next segment. The goal comes from
    state.current_stage, so callers pass the stage being entered.
    The whole history is included as context.
    """
    goal = STAGE_GOALS[state.current_stage]
    if state.history:
        context = "Previous Event: " + " ".join(state.history)
    else:
        context = BEGINNING_CONTEXT
    choice_info = f"User chose: {user_choice}" if user_choice is not None else ""

    lines = [
        f"Generate the next part of a {state.genre} story.",
        context,
        choice_info,
        f"Current Narrative Goal: {goal}",
        LENGTH_INSTRUCTION,
    ]
    if state.current_stage is not Stage.END:
        lines.append(CHOICES_INSTRUCTION)
    lines.append("---")
    lines.append(EXAMPLE_OUTPUT)
    return "\n".join(lines)
