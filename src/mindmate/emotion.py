"""
Keyword emotion classifier.

Rules are checked in order and the first rule with a keyword contained in the
lowercased text wins. Unmatched text yields None so the caller can keep the
emotion it already has.
"""

from typing import Optional

from mindmate.models.emotion import EmotionLabel

EMOTION_RULES: tuple[tuple[EmotionLabel, tuple[str, ...]], ...] = (
    (EmotionLabel.HAPPY, ("happy", "joy", "excited")),
    (EmotionLabel.SAD, ("sad", "depressed", "unhappy")),
    (EmotionLabel.ANGRY, ("angry", "frustrated", "mad")),
    (EmotionLabel.ANXIOUS, ("anxious", "nervous", "worried")),
    (EmotionLabel.CALM, ("calm", "peaceful", "relaxed")),
)


def classify(text: str) -> Optional[EmotionLabel]:
    lowered = text.lower()
    for label, keywords in EMOTION_RULES:
        if any(keyword in lowered for keyword in keywords):
            return label
    return None
