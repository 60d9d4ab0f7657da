from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

class TranslateRequest(BaseModel):
    sentence: str = Field(..., min_length=1, description="English sentence to translate")
    vocabulary: Optional[Any] = Field(None, description="Known word translations passed to the model")
    grammar_rules: Optional[Any] = Field(None, alias="grammarRules", description="Grammar rules passed to the model")

    model_config = ConfigDict(populate_by_name=True)
