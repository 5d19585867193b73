"""
Rule-based diagnosis pipeline for the Symptom Checker project.

Provides:
- count_matches: how many of a condition's keywords the extracted terms hit
- select_best_match: scans the catalog and picks one winning condition
- build_diagnosis / fallback_diagnosis: assemble the result record
- diagnose: orchestrates normalize -> extract -> match -> assemble
"""

import hashlib
import logging
from typing import List, Optional, Sequence, Tuple

from conditions import CONDITION_CATALOG
from pydantic_models import ConditionPattern, Diagnosis, Symptom, new_id, utc_now
from text_processing import process_symptoms

logger = logging.getLogger("symptom_checker.engine")

FALLBACK_CONDITION = "Unspecified Condition"
FALLBACK_CONFIDENCE = 0.5
FALLBACK_RECOMMENDATIONS = (
    "Monitor your symptoms",
    "Rest and stay hydrated",
    "Consider consulting a healthcare provider if symptoms persist or worsen",
    "Keep track of any changes in symptoms",
    "Maintain good hygiene practices",
)


def count_matches(relevant_terms: Sequence[str], pattern: ConditionPattern) -> int:
    """
    Number of distinct pattern keywords satisfied by at least one term.
    A keyword is satisfied when it contains the term or the term contains it.
    """
    return sum(
        1
        for keyword in pattern.symptoms
        if any(keyword in term or term in keyword for term in relevant_terms)
    )


def select_best_match(
    relevant_terms: Sequence[str], catalog: Sequence[ConditionPattern] = CONDITION_CATALOG
) -> Optional[Tuple[ConditionPattern, int]]:
    best: Optional[ConditionPattern] = None
    best_count = 0
    for pattern in catalog:
        count = count_matches(relevant_terms, pattern)
        # strictly greater: on ties the earlier catalog entry stays
        if count >= pattern.min_matches and count > best_count:
            best = pattern
            best_count = count
    if best is None:
        return None
    return best, best_count


def build_diagnosis(pattern: ConditionPattern, symptoms: Sequence[Symptom]) -> Diagnosis:
    return Diagnosis(
        id=new_id(),
        condition=pattern.condition,
        confidence=pattern.confidence,
        recommendations=list(pattern.recommendations),
        should_see_doctor=pattern.should_see_doctor,
        severity=pattern.severity,
        timestamp=utc_now(),
        symptoms=list(symptoms),
    )


def fallback_diagnosis(symptoms: Sequence[Symptom]) -> Diagnosis:
    return Diagnosis(
        id=new_id(),
        condition=FALLBACK_CONDITION,
        confidence=FALLBACK_CONFIDENCE,
        recommendations=list(FALLBACK_RECOMMENDATIONS),
        should_see_doctor=True,
        severity="medium",
        timestamp=utc_now(),
        symptoms=list(symptoms),
    )


def _symptom_hash(cleaned_descriptions: List[str]) -> str:
    joined = "\n".join(cleaned_descriptions)
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()


def diagnose(
    symptoms: Sequence[Symptom], catalog: Sequence[ConditionPattern] = CONDITION_CATALOG
) -> Diagnosis:
    """
    Primary orchestration:
    - normalize and extract medical terms from every symptom description
    - flatten the terms in submission order
    - match against the catalog
    - return the winner's diagnosis, or the fallback when nothing qualifies
    """
    processed = process_symptoms(symptoms)
    relevant_terms = [term for p in processed for term in p.relevant_terms]
    symptom_hash = _symptom_hash([p.cleaned_description for p in processed])
    logger.debug("symptom %s relevant terms: %s", symptom_hash[:12], relevant_terms)

    match = select_best_match(relevant_terms, catalog)
    if match is None:
        logger.info(
            "diagnosis symptom_hash=%s symptoms=%d condition=fallback",
            symptom_hash, len(processed),
        )
        return fallback_diagnosis(symptoms)

    pattern, match_count = match
    logger.info(
        "diagnosis symptom_hash=%s symptoms=%d condition=%r matches=%d",
        symptom_hash, len(processed), pattern.condition, match_count,
    )
    return build_diagnosis(pattern, symptoms)
