"""
Emotion labels inferred from user input.
"""

from enum import Enum


class EmotionLabel(str, Enum):
    HAPPY = "happy"
    SAD = "sad"
    ANGRY = "angry"
    ANXIOUS = "anxious"
    CALM = "calm"
    NEUTRAL = "neutral"

    def __str__(self) -> str:
        return self.value
