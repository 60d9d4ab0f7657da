from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

class HistoryBase(BaseModel):
    en: str = Field(..., min_length=1, description="Source sentence")
    mnw: str = Field(..., min_length=1, description="Translated sentence")

class HistoryCreate(HistoryBase):
    pass

class HistoryCreated(HistoryBase):
    id: int

    model_config = ConfigDict(from_attributes=True)

class HistoryRead(HistoryCreated):
    created_at: datetime
