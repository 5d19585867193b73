import uuid
from datetime import datetime, timezone
from typing import List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

SymptomSeverity = Literal["mild", "moderate", "severe"]
ConditionSeverity = Literal["low", "medium", "high"]


def new_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class Symptom(BaseModel):
    """A single free-text report of a physical complaint."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    severity: SymptomSeverity
    duration: str
    description: str
    timestamp: str

    @classmethod
    def from_text(cls, text: str, severity: SymptomSeverity = "moderate") -> "Symptom":
        return cls(
            id=new_id(),
            name=text,
            severity=severity,
            duration="recent",
            description=text,
            timestamp=utc_now(),
        )


class ProcessedSymptom(Symptom):
    tokens: List[str] = Field(default_factory=list)
    cleaned_description: str = ""
    relevant_terms: List[str] = Field(default_factory=list)


class ConditionPattern(BaseModel):
    """Catalog rule mapping a keyword set and threshold to a condition."""

    model_config = ConfigDict(frozen=True)

    condition: str
    symptoms: Tuple[str, ...]
    min_matches: int = Field(..., ge=1)
    confidence: float = Field(..., gt=0.0, le=1.0)
    recommendations: Tuple[str, ...]
    should_see_doctor: bool
    severity: ConditionSeverity
    urgent: bool = False

    @model_validator(mode="after")
    def _check_keywords(self):
        if any(not s for s in self.symptoms):
            raise ValueError(f"{self.condition}: empty keyword")
        if len(set(self.symptoms)) != len(self.symptoms):
            raise ValueError(f"{self.condition}: duplicate keywords")
        if self.min_matches > len(self.symptoms):
            raise ValueError(
                f"{self.condition}: min_matches={self.min_matches} exceeds "
                f"{len(self.symptoms)} keywords"
            )
        return self


class Diagnosis(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    condition: str
    confidence: float
    recommendations: List[str]
    should_see_doctor: bool
    severity: ConditionSeverity
    timestamp: str
    symptoms: List[Symptom]


class Feedback(BaseModel):
    diagnosis_id: str
    was_helpful: bool
    comments: Optional[str] = None
    timestamp: str = Field(default_factory=utc_now)


class DiagnoseRequest(BaseModel):
    symptoms: Union[str, List[Symptom]]
    severity: SymptomSeverity = "moderate"

    def to_symptoms(self) -> List[Symptom]:
        if isinstance(self.symptoms, str):
            if not self.symptoms.strip():
                return []
            return [Symptom.from_text(self.symptoms, self.severity)]
        return list(self.symptoms)
