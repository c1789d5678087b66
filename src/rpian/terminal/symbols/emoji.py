"""Face emoji. Most of these are two cells wide."""

from __future__ import annotations

from enum import Enum


class EmojiSymbol(str, Enum):
    # Happy
    HAPPY_FACE = "☺"  # U+263A
    SMILING_FACE = "\U0001f60a"
    GRINNING_FACE = "\U0001f600"
    LAUGHING_FACE = "\U0001f604"
    TEARS_OF_JOY = "\U0001f602"
    WINKING_FACE = "\U0001f609"
    SMILING_EYES = "\U0001f60a"  # alias of SMILING_FACE
    # Negative
    SAD_FACE = "☹"  # U+2639
    SLIGHTLY_FROWNING_FACE = "\U0001f641"
    FROWNING_FACE = "\U0001f626"
    CRYING_FACE = "\U0001f622"
    LOUDLY_CRYING_FACE = "\U0001f62d"
    ANGRY_FACE = "\U0001f620"
    POUTING_FACE = "\U0001f621"
    # Neutral
    NEUTRAL_FACE = "\U0001f610"
    EXPRESSIONLESS_FACE = "\U0001f611"
    CONFUSED_FACE = "\U0001f615"
    THINKING_FACE = "\U0001f914"
    ZIPPER_MOUTH_FACE = "\U0001f910"
    # Playful
    STUCK_OUT_TONGUE = "\U0001f61b"
    WINKING_TONGUE = "\U0001f61c"
    ZANY = "\U0001f92a"
    # Sleep
    SLEEPY_FACE = "\U0001f62a"
    SLEEPING_FACE = "\U0001f634"
    # Other
    NERD_FACE = "\U0001f913"
    COWBOY_HAT_FACE = "\U0001f920"
    CLOWN_FACE = "\U0001f921"
    ALIEN = "\U0001f47d"
    ROBOT = "\U0001f916"
