"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- NLP Models ---
NER_MODEL_NAME: str = os.getenv("NER_MODEL_NAME", "HooshvareLab/bert-base-parsbert-ner-uncased")
NER_DEVICE: int = int(os.getenv("NER_DEVICE", "-1"))

# --- Pipeline ---
NER_STRICT_CONTINUATION: bool = os.getenv("NER_STRICT_CONTINUATION", "true").lower() == "true"
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
