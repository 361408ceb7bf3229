"""Generative AI service for comment classification."""

import hashlib
import json
import logging
import re
from concurrent.futures import ThreadPoolExecutor
from textwrap import dedent
from typing import Any, Dict, List, Optional, Sequence

import openai
from diskcache import Cache
from tenacity import retry, stop_after_attempt, wait_exponential

from ..core.config import settings
from ..core.constants import CacheConstants, ErrorConstants, PromptConstants
from ..core.exceptions import GenAIError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "Anda adalah analis ujaran kebencian dan UU ITE. Jawab hanya dengan JSON."

ANALYSIS_PROMPT = dedent("""
Analisis komentar media sosial berikut dalam Bahasa Indonesia.

KOMENTAR: "{comment}"

Kembalikan JSON dengan field:
- "sentiment": "hate" | "neutral" | "positive"
- "confidence": angka 0-1
- "category": "SARA" | "Penghinaan" | "Provokasi" | "Lainnya (Negatif)" | null (hanya untuk hate)
- "iteViolationType": "defamation" | "blasphemy" | "unpleasant_acts" | "incitement" | "hoax" | null
- "iteViolationLabel": label Indonesia dari tipe pelanggaran
- "speechActType": "assertive" | "directive" | "commissive" | "expressive" | "declarative"
- "speechActSubtype": subtipe, misalnya "Tuduhan/Fitnah", "Ancaman/Perintah Kasar",
  "Janji Balas Dendam", "Penghinaan/Ejekan", "Deklarasi Diskriminatif"
- "uiteViolation": {{"hasViolation": bool, "articles": ["27(3)" | "27(4)" | "28(1)" | "28(2)" | "45A(2)"],
  "severity": "low" | "medium" | "high", "description": str}}

Tindak tutur:
- Asertif: menyatakan fakta/pendapat (agresif: Tuduhan/Fitnah)
- Direktif: memerintah/meminta (agresif: Ancaman/Perintah Kasar)
- Komisif: berjanji/berkomitmen (agresif: Janji Balas Dendam)
- Ekspresif: mengekspresikan perasaan (agresif: Penghinaan/Ejekan)
- Deklaratif: menyatakan status baru (agresif: Deklarasi Diskriminatif)

Jawab HANYA dengan JSON, tanpa penjelasan, tanpa code fence.
""").strip()


def _strip_code_fences(s: str) -> str:
    s = s.strip()
    return re.sub(r"^```(?:json)?|```$", "", s, flags=re.IGNORECASE | re.MULTILINE).strip()


def _safe_json(s: str) -> Dict[str, Any]:
    """Parse a JSON object from a model response, tolerating fences and trailing commas."""
    cleaned = _strip_code_fences(s or "")
    try:
        data = json.loads(cleaned)
    except Exception:
        cleaned = re.sub(r",\s*([}\]])", r"\1", cleaned)
        m = re.search(r"\{.*\}", cleaned, re.S)
        if not m:
            raise GenAIError(f"Could not parse JSON from: {cleaned[:200]}...")
        try:
            data = json.loads(m.group(0))
        except Exception as e:
            raise GenAIError(f"Could not parse JSON from: {cleaned[:200]}...") from e
    if not isinstance(data, dict):
        raise GenAIError(f"Expected a JSON object, got {type(data).__name__}")
    return data


class GenAIServiceFactory:
    """Factory for creating generative AI services."""

    @staticmethod
    def create():
        """Create appropriate generative AI service."""
        if settings.effective_genai_key:
            return GenAIService()
        return FallbackGenAIService()


class GenAIService:
    """Gemini classification through the OpenAI-compatible API."""

    available = True

    def __init__(self, client=None, cache=None):
        self.client = client or openai.OpenAI(
            api_key=settings.effective_genai_key,
            base_url=settings.genai_base_url,
        )
        self.model = settings.genai_model
        self.batch_size = max(1, settings.genai_batch_size)
        self.cache = cache if cache is not None else Cache(settings.cache_dir)
        logger.info(f"Generative AI service initialized with model {self.model}")

    @retry(
        stop=stop_after_attempt(settings.max_retries),
        wait=wait_exponential(multiplier=settings.retry_delay, max=settings.retry_backoff * 10),
        reraise=True,
    )
    def _complete(self, system: str, user: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            temperature=PromptConstants.TEMPERATURE,
            max_tokens=PromptConstants.MAX_TOKENS,
            timeout=ErrorConstants.REQUEST_TIMEOUT,
        )
        content = response.choices[0].message.content
        if not content:
            raise GenAIError("Empty response from generative AI")
        return content.strip()

    def chat(self, system: str, user: str) -> str:
        """Chat completion with response caching."""
        cache_key = hashlib.md5(
            f"{system}|{user}|{self.model}|{PromptConstants.PROMPT_VERSION}".encode()
        ).hexdigest()

        cached = self.cache.get(cache_key)
        if cached:
            logger.debug(f"Cache hit for generative AI request: {cache_key[:CacheConstants.CACHE_KEY_LENGTH]}...")
            return cached

        result = self._complete(system, user)
        self.cache.set(cache_key, result, expire=3600 * CacheConstants.CACHE_TTL_HOURS)
        return result

    def analyze_comment(self, text: str) -> Dict[str, Any]:
        """Classify one comment; raises GenAIError on any failure."""
        try:
            response = self.chat(SYSTEM_PROMPT, ANALYSIS_PROMPT.format(comment=text))
        except GenAIError:
            raise
        except Exception as e:
            raise GenAIError(f"Generative AI request failed: {e}") from e
        return _safe_json(response)

    def analyze_comments(self, texts: Sequence[str]) -> List[Optional[Dict[str, Any]]]:
        """Classify comments concurrently in batches; failed comments yield None."""
        results: List[Optional[Dict[str, Any]]] = []
        with ThreadPoolExecutor(max_workers=self.batch_size) as executor:
            for start in range(0, len(texts), self.batch_size):
                batch = list(texts[start:start + self.batch_size])
                futures = [executor.submit(self.analyze_comment, t) for t in batch]
                for idx, future in enumerate(futures, start):
                    try:
                        results.append(future.result())
                    except Exception as e:
                        logger.warning(f"Generative AI analysis failed for comment {idx + 1}: {e}")
                        results.append(None)
        return results


class FallbackGenAIService:
    """Stand-in used when no generative AI key is configured."""

    available = False

    def __init__(self):
        logger.info("No generative AI key configured, using rule-based analysis only")

    def analyze_comment(self, text: str) -> Dict[str, Any]:
        raise GenAIError("Generative AI API key is not set")

    def analyze_comments(self, texts: Sequence[str]) -> List[Optional[Dict[str, Any]]]:
        return [None] * len(texts)
