"""
Runner for the contact extraction pipeline.

Reads:
  - the file given as first argument, or stdin when omitted

Produces:
  - the extracted contact (camelCase JSON) on stdout
"""
import asyncio
import json
import logging
import sys
from pathlib import Path

from contact_extraction.config import settings

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("run_extraction")

from contact_extraction.entity_extraction.ner_adapter import NerModelHandle  # noqa: E402
from contact_extraction.postprocessing.pipeline import ContactExtractor  # noqa: E402


def main(argv: list) -> int:
    # -----------------------------------------------------------------------
    # Load input
    # -----------------------------------------------------------------------
    if len(argv) > 1:
        input_path = Path(argv[1])
        logger.info("Reading input from %s", input_path)
        text = input_path.read_text(encoding="utf-8")
    else:
        logger.info("Reading input from stdin")
        text = sys.stdin.read()

    logger.info("input             : %d chars", len(text))
    logger.info("NER model         : %s", settings.NER_MODEL_NAME)

    # -----------------------------------------------------------------------
    # Run pipeline
    # -----------------------------------------------------------------------
    extractor = ContactExtractor(ner_model=NerModelHandle())
    outcome = asyncio.run(extractor.extract(text))

    info = outcome.info
    logger.info("status            : %s", outcome.stage.value)
    if not outcome.success:
        logger.error("failed at %s: %s", outcome.failed_stage.value, outcome.error)
    logger.info("phones            : %d", len(info.phone_numbers))
    logger.info("emails            : %d", len(info.email_addresses))

    print(json.dumps(info.model_dump(by_alias=True), ensure_ascii=False, indent=2))
    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
