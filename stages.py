# stages.py
# Stage enum and the fixed per-stage asset table

from __future__ import annotations

from enum import Enum


class Stage(Enum):
    SELECT = 1
    SQUEEZE = 2
    DRINK = 3
    RESTART = 4


# Inclusive bounds for the random squeeze count in SQUEEZE
SQUEEZE_MIN = 2
SQUEEZE_MAX = 4

# (image key, text key, alt-text key) for each stage
STAGE_ASSETS: dict[Stage, tuple[str, str, str]] = {
    Stage.SELECT: ("lemon_tree", "lemon_select", "lemon_tree_content_description"),
    Stage.SQUEEZE: ("lemon_squeeze", "lemon_squeeze", "lemon_content_description"),
    Stage.DRINK: ("lemon_drink", "lemon_drink", "lemonade_content_description"),
    Stage.RESTART: ("lemon_restart", "lemon_empty_glass", "empty_glass_content_description"),
}

NEXT_STAGE: dict[Stage, Stage] = {
    Stage.SELECT: Stage.SQUEEZE,
    Stage.SQUEEZE: Stage.DRINK,
    Stage.DRINK: Stage.RESTART,
    Stage.RESTART: Stage.SELECT,
}


def button_label_for(stage: Stage) -> str:
    """'Restart' on the empty glass, 'Next' everywhere else."""
    return "Restart" if stage is Stage.RESTART else "Next"
