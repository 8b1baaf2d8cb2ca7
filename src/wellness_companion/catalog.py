"""Static content for the guided practice tools."""

from dataclasses import dataclass
from typing import List, Optional

JOURNAL_PROMPTS = {
    "Self-Reflection": [
        "What am I grateful for today, and why does it matter to me?",
        "What emotion am I avoiding right now, and what is it trying to tell me?",
        "If my best friend was feeling what I'm feeling, what would I tell them?",
        "What's one thing I learned about myself this week?",
        "What would I do if I knew I couldn't fail?",
    ],
    "Emotional Processing": [
        "What's the story I'm telling myself about this situation? Is it helping or hurting me?",
        "When did I feel most like myself today?",
        "What's underneath this feeling I'm having?",
        "How has this challenge helped me grow?",
        "What do I need to forgive myself for?",
    ],
    "Growth & Goals": [
        "What small step can I take today toward something I care about?",
        "What pattern in my life am I ready to change?",
        "What would my future self thank me for doing today?",
        "What's one way I can be kinder to myself this week?",
        "What does success mean to me right now?",
    ],
    "Relationships": [
        "How did I show up in my relationships today?",
        "What do I need more of in my relationships?",
        "Who in my life makes me feel most understood?",
        "What boundary do I need to set or maintain?",
        "How can I better communicate what I need?",
    ],
}


@dataclass(frozen=True)
class Meditation:
    id: str
    title: str
    description: str
    duration: int  # minutes
    instruction: str


MEDITATIONS = [
    Meditation(
        "breathing",
        "Breathing Meditation",
        "Focus on your breath to calm the mind",
        5,
        "Breathe naturally and count each breath. When you reach 10, start over.",
    ),
    Meditation(
        "body-scan",
        "Body Scan",
        "Progressive relaxation through body awareness",
        10,
        "Slowly scan your body from head to toe, noticing any tension and releasing it.",
    ),
    Meditation(
        "loving-kindness",
        "Loving-Kindness",
        "Cultivate compassion for yourself and others",
        8,
        "Repeat: 'May I be happy, may I be healthy, may I be safe, may I live with ease.'",
    ),
    Meditation(
        "mindfulness",
        "Mindfulness",
        "Present moment awareness without judgment",
        7,
        "Notice thoughts, feelings, and sensations as they arise without getting caught up in them.",
    ),
]


@dataclass(frozen=True)
class GroundingStep:
    number: int
    sense: str
    instruction: str
    examples: List[str]


GROUNDING_STEPS = [
    GroundingStep(5, "See", "Look around and name 5 things you can see",
                  ["A blue pen on the desk", "Sunlight coming through the window", "A plant in the corner"]),
    GroundingStep(4, "Touch", "Notice 4 things you can touch or feel",
                  ["The texture of your clothes", "The temperature of the air", "Your feet on the ground"]),
    GroundingStep(3, "Hear", "Listen for 3 things you can hear",
                  ["Birds chirping outside", "The hum of air conditioning", "Your own breathing"]),
    GroundingStep(2, "Smell", "Identify 2 things you can smell",
                  ["Coffee in the air", "Fresh laundry", "A hint of perfume"]),
    GroundingStep(1, "Taste", "Notice 1 thing you can taste",
                  ["The lingering taste of tea", "The freshness in your mouth", "A subtle sweetness"]),
]

# phase -> (seconds, next phase, instruction)
BREATHING_PHASES = {
    "inhale": (4, "hold", "Breathe in slowly"),
    "hold": (4, "exhale", "Hold your breath"),
    "exhale": (6, "inhale", "Breathe out gently"),
}

MOOD_OPTIONS = [
    ("😢", "Very Low", 1),
    ("😟", "Low", 2),
    ("😐", "Neutral", 3),
    ("😊", "Good", 4),
    ("😄", "Great", 5),
]

ENERGY_OPTIONS = [
    ("Exhausted", 1),
    ("Tired", 2),
    ("Okay", 3),
    ("Energetic", 4),
    ("Vibrant", 5),
]

MOOD_FACTORS = [
    "Work/Study",
    "Relationships",
    "Health",
    "Sleep",
    "Exercise",
    "Social Media",
    "Weather",
    "Family",
    "Finances",
    "Other",
]


def get_meditation(meditation_id: str) -> Optional[Meditation]:
    for meditation in MEDITATIONS:
        if meditation.id == meditation_id:
            return meditation
    return None


def breathing_cycle_seconds() -> int:
    return sum(seconds for seconds, _, _ in BREATHING_PHASES.values())


def catalog_dict() -> dict:
    """Everything the practice tools display, in JSON-friendly form."""
    return {
        "journal_prompts": [
            {"category": category, "prompts": prompts}
            for category, prompts in JOURNAL_PROMPTS.items()
        ],
        "meditations": [
            {
                "id": m.id,
                "title": m.title,
                "description": m.description,
                "duration": m.duration,
                "instruction": m.instruction,
            }
            for m in MEDITATIONS
        ],
        "grounding_steps": [
            {"number": s.number, "sense": s.sense, "instruction": s.instruction, "examples": s.examples}
            for s in GROUNDING_STEPS
        ],
        "breathing_phases": [
            {"phase": phase, "seconds": seconds, "next": next_phase, "instruction": instruction}
            for phase, (seconds, next_phase, instruction) in BREATHING_PHASES.items()
        ],
        "mood_options": [
            {"emoji": emoji, "label": label, "value": value} for emoji, label, value in MOOD_OPTIONS
        ],
        "energy_options": [{"label": label, "value": value} for label, value in ENERGY_OPTIONS],
        "mood_factors": MOOD_FACTORS,
    }
