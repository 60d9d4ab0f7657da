import json
from typing import Any
from fastapi import Request


def build_prompt(sentence: str, vocabulary: Any = None, grammar_rules: Any = None) -> str:
    return f"""
Translate to Mon using grammar rules:
Sentence: {sentence}
Vocabulary: {json.dumps(vocabulary, ensure_ascii=False)}
Rules: {json.dumps(grammar_rules, ensure_ascii=False)}

Return ONLY JSON:
{{"translation":"...", "unknownWord":"..."}}
"""


def parse_model_reply(text: str) -> Any:
    """Parse the model's reply as JSON. Raises ``ValueError`` when it is not."""
    if text is None:
        raise ValueError("Empty reply from model")
    return json.loads(text)


def get_translator(request: Request):
    return request.app.state.translator
