"""
Canned replies used when the generation service cannot be reached.
"""

from mindmate.models.emotion import EmotionLabel

FALLBACK_REPLIES: dict[EmotionLabel, str] = {
    EmotionLabel.HAPPY: "Your joy is contagious! What's contributing to your happiness today?",
    EmotionLabel.SAD: "I'm sorry to hear you're feeling down. Would you like to talk more about what's troubling you?",
    EmotionLabel.ANGRY: "I can sense your frustration. Would it help to explore what triggered these feelings?",
    EmotionLabel.ANXIOUS: "Anxiety can be challenging. Would you like to try a quick breathing exercise together?",
    EmotionLabel.CALM: "It's wonderful that you're feeling peaceful. What helps you maintain this sense of calm?",
    EmotionLabel.NEUTRAL: "I'm here to support you. What's on your mind today?",
}


def fallback_reply(label: object) -> str:
    """Return the canned reply for `label`; anything unknown gets the neutral reply."""
    try:
        return FALLBACK_REPLIES[EmotionLabel(label)]
    except (ValueError, KeyError, TypeError):
        return FALLBACK_REPLIES[EmotionLabel.NEUTRAL]
