"""
Static condition catalog.

Order matters: when two conditions match the same number of keywords the one
declared first wins. Every entry is validated when this module is imported.
"""

from typing import Optional, Tuple

from pydantic_models import ConditionPattern

_RAW_CONDITIONS = [
    {
        "condition": "Common Cold",
        "symptoms": ["runny", "nose", "sore", "throat", "sneezing", "cough", "mild", "fever"],
        "min_matches": 3,
        "confidence": 0.85,
        "recommendations": [
            "Rest and get plenty of sleep",
            "Stay hydrated with water and warm liquids",
            "Use over-the-counter cold medications if needed",
            "Try saline nasal drops or sprays",
            "Use a humidifier to add moisture to the air",
        ],
        "should_see_doctor": False,
        "severity": "low",
        "urgent": False,
    },
    {
        "condition": "Influenza (Flu)",
        "symptoms": ["fever", "chills", "muscle", "aches", "fatigue", "sore", "throat", "cough"],
        "min_matches": 4,
        "confidence": 0.8,
        "recommendations": [
            "Rest in bed and avoid physical exertion",
            "Take fever reducers like acetaminophen",
            "Stay hydrated with water and clear broths",
            "Use a humidifier to ease breathing",
            "Consider antiviral medications if caught early",
        ],
        "should_see_doctor": True,
        "severity": "medium",
        "urgent": False,
    },
    {
        "condition": "Possible COVID-19",
        "symptoms": ["fever", "cough", "shortness", "breath", "taste", "smell", "loss", "fatigue"],
        "min_matches": 3,
        "confidence": 0.75,
        "recommendations": [
            "Isolate immediately to protect others",
            "Get tested for COVID-19",
            "Monitor your oxygen levels if possible",
            "Stay hydrated and rest",
            "Take fever reducers if needed",
        ],
        "should_see_doctor": True,
        "severity": "high",
        "urgent": True,
    },
    {
        "condition": "Seasonal Allergies",
        "symptoms": ["sneezing", "watery", "eyes", "itchy", "runny", "nose", "cough"],
        "min_matches": 3,
        "confidence": 0.9,
        "recommendations": [
            "Take antihistamines as recommended",
            "Avoid known allergens when possible",
            "Use air purifiers indoors",
            "Try nasal irrigation with saline",
            "Keep windows closed during high pollen times",
        ],
        "should_see_doctor": False,
        "severity": "low",
        "urgent": False,
    },
    {
        "condition": "Migraine",
        "symptoms": ["headache", "throbbing", "light", "sound", "sensitive", "nausea", "visual"],
        "min_matches": 3,
        "confidence": 0.85,
        "recommendations": [
            "Rest in a quiet, dark room",
            "Apply cold or warm compresses to your head or neck",
            "Stay hydrated and avoid triggers",
            "Try over-the-counter migraine medications",
            "Practice relaxation techniques",
        ],
        "should_see_doctor": False,
        "severity": "medium",
        "urgent": False,
    },
    {
        "condition": "Gastroenteritis",
        "symptoms": ["nausea", "vomiting", "stomach", "abdominal", "pain", "diarrhea"],
        "min_matches": 3,
        "confidence": 0.8,
        "recommendations": [
            "Stay hydrated with clear fluids",
            "Try the BRAT diet (Bananas, Rice, Applesauce, Toast)",
            "Avoid dairy and fatty foods",
            "Rest your stomach for a few hours after vomiting",
            "Gradually return to normal diet",
        ],
        "should_see_doctor": False,
        "severity": "medium",
        "urgent": False,
    },
    {
        "condition": "Possible Heart Issue",
        "symptoms": ["chest", "pain", "shortness", "breath", "dizzy", "lightheaded", "fatigue"],
        "min_matches": 2,
        "confidence": 0.7,
        "recommendations": [
            "⚠️ SEEK IMMEDIATE MEDICAL ATTENTION",
            "Call emergency services (911)",
            "Sit or lie down to prevent falls",
            "Take prescribed heart medications if any",
            "Stay calm and take slow breaths",
        ],
        "should_see_doctor": True,
        "severity": "high",
        "urgent": True,
    },
    {
        "condition": "Skin Condition",
        "symptoms": ["rash", "itchy", "bumps", "blisters", "swelling", "dry", "peeling"],
        "min_matches": 2,
        "confidence": 0.75,
        "recommendations": [
            "Avoid scratching the affected area",
            "Apply cool compresses for relief",
            "Use over-the-counter hydrocortisone cream",
            "Take an antihistamine if itching is severe",
            "Keep the area clean and dry",
        ],
        "should_see_doctor": False,
        "severity": "low",
        "urgent": False,
    },
    {
        "condition": "Dehydration",
        "symptoms": ["thirsty", "dark", "urine", "fatigue", "dizzy", "mouth", "dry"],
        "min_matches": 3,
        "confidence": 0.85,
        "recommendations": [
            "Drink water or sports drinks slowly",
            "Avoid caffeine and alcohol",
            "Eat foods high in water content",
            "Rest in a cool environment",
            "Monitor urine color - should be light yellow",
        ],
        "should_see_doctor": False,
        "severity": "medium",
        "urgent": False,
    },
]


def build_catalog(raw_conditions) -> Tuple[ConditionPattern, ...]:
    """Validate raw rule dicts into an immutable, ordered catalog.

    Raises pydantic.ValidationError on a malformed entry, e.g. a threshold
    larger than the keyword list.
    """
    return tuple(ConditionPattern(**raw) for raw in raw_conditions)


CONDITION_CATALOG = build_catalog(_RAW_CONDITIONS)


def get_condition(name: str, catalog=CONDITION_CATALOG) -> Optional[ConditionPattern]:
    for pattern in catalog:
        if pattern.condition == name:
            return pattern
    return None
