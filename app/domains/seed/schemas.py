from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SeedRequest(BaseModel):
    companies: Optional[List[Dict[str, Any]]] = None
    use_sample: bool = Field(False, alias="useSample")

    model_config = ConfigDict(populate_by_name=True)


class SeedResult(BaseModel):
    success: bool
    created: int = 0
    updated: int = 0
    errors: int = 0
