from pydantic import BaseModel, Field


class QuickAnalyzeRequest(BaseModel):
    cv_text: str = Field(..., max_length=50000, description="Plain text CV content")
    job_description: str = Field(..., max_length=10000, description="Job description text")


class OptimizeRequest(QuickAnalyzeRequest):
    full_name: str = Field("", max_length=200)
    role: str = Field("", max_length=200, description="Target role title")
    company: str = Field("", max_length=200)


class ParseCVRequest(BaseModel):
    cv_text: str = Field(..., max_length=50000)
    full_name: str = Field("", max_length=200, description="Overrides the first-line name")
    location: str = Field("", max_length=200)
