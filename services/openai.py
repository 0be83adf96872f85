from openai import OpenAI, APIError
import re
import json
from typing import List, Optional

from models import ExtractionRequestError, ExtractionParseError
from .config import Settings, load_settings

EXTRACTION_FAILED_MESSAGE = "Failed to extract exercises from the PDF. Please try again."

SYSTEM_PROMPT = "You are a fitness expert assistant that extracts exercise names from text."

USER_PROMPT_TEMPLATE = """
You are an AI assistant specialized in fitness. The following text was extracted from a workout plan PDF.
Please identify all exercise names mentioned in this text and return them as a JSON array of strings.
Only include proper exercise names, not section titles or other text. Remove any duplicate exercises.
If there are variations of the same exercise (e.g., "Barbell Squat" and "Barbell Back Squat"), keep both.

PDF Text:
{pdf_text}

Return only a JSON array of exercise names, nothing else. Format: ["Exercise 1", "Exercise 2", ...]
"""

TEMPERATURE = 0.2
MAX_TOKENS = 1024

# First "[" through the last "]", across newlines
JSON_ARRAY_RE = re.compile(r"\[.*\]", re.DOTALL)

_oai = None
_oai_conf = None
def _get_openai_client(settings: Settings) -> OpenAI:
    global _oai, _oai_conf
    api_key = settings.require("groq_api_key")
    if not _oai or _oai_conf != (api_key, settings.groq_base_url):
        # Groq speaks the OpenAI chat completions protocol; a single attempt per call
        _oai = OpenAI(api_key=api_key, base_url=settings.groq_base_url, max_retries=0,
                      timeout=settings.http_timeout)
        _oai_conf = (api_key, settings.groq_base_url)
    return _oai

def build_messages(pdf_text: str) -> List[dict]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(pdf_text=pdf_text)},
    ]

def parse_exercise_list(text: str) -> list:
    """
    Pull the JSON array out of a free-form completion, e.g.
    'Sure! Here you go: ["Plank"] Hope that helps.' -> ["Plank"].
    Raises ExtractionParseError when no array can be recovered.
    """
    match = JSON_ARRAY_RE.search((text or "").strip())
    if not match:
        raise ExtractionParseError(EXTRACTION_FAILED_MESSAGE,
                                   detail="Could not parse the exercise list from AI response")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ExtractionParseError(EXTRACTION_FAILED_MESSAGE, detail=f"Invalid JSON array: {e}") from e
    if not isinstance(data, list):
        raise ExtractionParseError(EXTRACTION_FAILED_MESSAGE, detail="Model output is not a JSON array")
    return data

def clean_exercise_names(items: list) -> List[str]:
    # Keep model order; drop non-strings, blanks and exact repeats
    seen, names = set(), []
    for item in items:
        if not isinstance(item, str):
            continue
        name = item.strip()
        if name and name not in seen:
            seen.add(name); names.append(name)
    return names

def extract_exercises(pdf_text: str, settings: Optional[Settings] = None) -> List[str]:
    """
    Ask the language model for the exercise names in pdf_text.
    Returns them in the order the model listed them.
    Raises ExtractionRequestError (transport / status) or ExtractionParseError.
    """
    settings = settings or load_settings()
    print(f"[extract] requesting exercise list model={settings.groq_model} text_chars={len(pdf_text)}")
    oai = _get_openai_client(settings)
    try:
        resp = oai.chat.completions.create(
            model=settings.groq_model,
            messages=build_messages(pdf_text),
            temperature=TEMPERATURE,
            max_tokens=MAX_TOKENS,
        )
    except APIError as e:
        print(f"[extract] completion request failed: {e}")
        raise ExtractionRequestError(EXTRACTION_FAILED_MESSAGE, detail=str(e)) from e

    raw = (resp.choices[0].message.content or "") if resp.choices else ""
    names = clean_exercise_names(parse_exercise_list(raw))
    print(f"[extract] model returned {len(names)} exercises")
    return names
