from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    skills: int = 0  # size of the skill catalog


class BuildCVResponse(BaseModel):
    cv_text: str = ""
