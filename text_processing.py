import re
from typing import Iterable, List

from pydantic_models import ProcessedSymptom, Symptom

# ASCII word characters and any Unicode whitespace survive; accents, emoji and punctuation are dropped
_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")

STOP_WORDS = frozenset([
    "and", "the", "is", "in", "it", "of", "i", "have", "has", "had",
    "am", "feeling", "feel", "experiencing", "with", "a", "an", "or",
    "my", "me", "to", "been", "having",
])

MEDICAL_TERMS = frozenset([
    # cold and flu
    "fever", "cough", "sore", "throat", "runny", "nose", "sneezing",
    "chills", "muscle", "aches", "fatigue", "tired", "exhausted",
    # covid-19
    "shortness", "breath", "breathing", "taste", "smell", "loss",
    # allergy
    "watery", "eyes", "itchy", "itching",
    # headache and migraine
    "headache", "migraine", "throbbing", "light", "sound", "sensitive",
    "sensitivity", "nausea", "vomiting", "visual", "aura", "flashing",
    # stomach
    "stomach", "abdominal", "pain", "diarrhea", "constipation",
    # heart
    "chest", "dizzy", "dizziness", "lightheaded", "palpitations",
    # skin
    "rash", "rashes", "bumps", "blisters", "swelling", "swollen",
    "dry", "peeling", "skin",
    # dehydration
    "thirsty", "dehydrated", "urine", "dark", "mouth",
])


def clean_text(text: str) -> str:
    text = text.lower()
    text = _NON_WORD.sub("", text)
    return text.strip()


def tokenize(text: str) -> List[str]:
    return text.split()


def remove_stop_words(tokens: Iterable[str]) -> List[str]:
    return [t for t in tokens if t not in STOP_WORDS]


def extract_relevant_terms(tokens: Iterable[str]) -> List[str]:
    """Keep only tokens that are exact members of the medical vocabulary."""
    return [t for t in tokens if t in MEDICAL_TERMS]


def process_symptom(symptom: Symptom) -> ProcessedSymptom:
    cleaned = clean_text(symptom.description or "")
    tokens = remove_stop_words(tokenize(cleaned))
    return ProcessedSymptom(
        **symptom.model_dump(include=set(Symptom.model_fields)),
        tokens=tokens,
        cleaned_description=cleaned,
        relevant_terms=extract_relevant_terms(tokens),
    )


def process_symptoms(symptoms: Iterable[Symptom]) -> List[ProcessedSymptom]:
    return [process_symptom(s) for s in symptoms]
