"""Local text-classification model wrapped as an explicit capability."""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..core.config import settings
from ..core.constants import ClassifierConstants

logger = logging.getLogger(__name__)


class ModelState(Enum):
    READY = "ready"
    LOADING = "loading"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class ModelPrediction:
    label: str
    score: float


def _transformers_pipeline(model_name: str):
    from transformers import pipeline

    return pipeline("text-classification", model=model_name)


class TextClassifierCapability:
    """Text-classification model constructed once and passed to the pipeline.

    Starts UNAVAILABLE; load() moves it through LOADING to READY, or back to
    UNAVAILABLE when the model cannot be loaded. Callers only get predictions
    while READY.
    """

    def __init__(self, model_name: str = None, pipeline_factory: Callable[[str], Any] = None):
        self.model_name = model_name or settings.model_name
        self._factory = pipeline_factory or _transformers_pipeline
        self._classifier = None
        self._state = ModelState.UNAVAILABLE
        self._lock = threading.Lock()

    @property
    def state(self) -> ModelState:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state is ModelState.READY

    def load(self) -> ModelState:
        """Load the model once; later calls return the current state."""
        with self._lock:
            if self._state is ModelState.READY:
                return self._state
            self._state = ModelState.LOADING
            logger.info(f"Loading text-classification model {self.model_name}...")
            try:
                self._classifier = self._factory(self.model_name)
                self._state = ModelState.READY
                logger.info("Text-classification model loaded")
            except Exception as e:
                logger.warning(f"Model unavailable, using keyword analysis only: {e}")
                self._classifier = None
                self._state = ModelState.UNAVAILABLE
            return self._state

    def classify(self, text: str) -> Optional[ModelPrediction]:
        """Predict a label for text, or None when the model is not READY or fails."""
        if not self.ready or not text:
            return None
        try:
            output = self._classifier(text[:ClassifierConstants.MODEL_MAX_CHARS])
            top = output[0] if isinstance(output, list) else output
            return ModelPrediction(label=str(top["label"]), score=float(top["score"]))
        except Exception as e:
            logger.warning(f"Model prediction failed: {e}")
            return None
