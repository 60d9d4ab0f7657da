from pydantic import BaseModel, ConfigDict, Field

class VocabularyCreate(BaseModel):
    word: str = Field(..., min_length=1, description="Word or phrase; stored lowercased")
    translation: str = Field(..., min_length=1, description="Translation in the target language")

    model_config = ConfigDict(coerce_numbers_to_str=True)

class VocabularyUpdate(BaseModel):
    translation: str = Field(..., min_length=1)

    model_config = ConfigDict(coerce_numbers_to_str=True)

class VocabularyRead(BaseModel):
    word: str
    translation: str

class VocabularyLearned(VocabularyRead):
    learned: bool

class VocabularyDeleted(BaseModel):
    deleted: bool = True
    word: str
