"""
JSON Schema for the NER model adapter's raw output.

One record per sub-word token, as emitted by a transformers
token-classification pipeline run without aggregation.
"""

NER_OUTPUT_SCHEMA: dict = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["word", "entity", "start", "end"],
        "properties": {
            "word": {
                "type": "string",
                "description": "Sub-word piece, may carry a '##' or '▁' marker",
            },
            "entity": {
                "type": "string",
                "description": "BIO tag: 'O', 'B-<TYPE>' or 'I-<TYPE>'",
            },
            "start": {"type": "integer", "minimum": 0},
            "end": {"type": "integer", "minimum": 0},
            "score": {"type": "number"},
            "index": {"type": "integer"},
        },
    },
}
