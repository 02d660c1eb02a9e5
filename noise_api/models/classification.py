from pydantic import BaseModel, ConfigDict # type: ignore
from typing import List
from enum import Enum

class NoiseLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"

class ClassificationResult(BaseModel):
    """One label/score pair as returned by the inference endpoint."""
    model_config = ConfigDict(extra='allow')

    label: str
    score: float

class TopPrediction(BaseModel):
    label: str = "unknown"
    confidence: float = 0.0

def top_prediction(results: List[ClassificationResult]) -> TopPrediction:
    """Pick the highest-scoring label; the first one wins ties."""
    if not results:
        return TopPrediction()

    top = results[0]
    for current in results[1:]:
        if current.score > top.score:
            top = current

    return TopPrediction(label=top.label, confidence=top.score)
