from pydantic import BaseModel, ConfigDict, Field
from typing import List

class InputState(BaseModel):
    resume: str = Field(default="", description="Candidate resume as free text")
    job_description: str = Field(default="", description="Job description as free text")

    def is_complete(self) -> bool:
        """Both fields must contain something other than whitespace."""
        return bool(self.resume.strip()) and bool(self.job_description.strip())

class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    overall_score: int = Field(alias="overallScore", ge=0, le=100, description="Overall match score between 0 and 100")
    skills_match: int = Field(alias="skillsMatch", ge=0, le=100, description="Skill overlap between resume and job description")
    experience_match: int = Field(alias="experienceMatch", ge=0, le=100, description="Relevance of years and type of experience")
    qualifications_match: int = Field(alias="qualificationsMatch", ge=0, le=100, description="Degrees, certifications and other requirements")
    strengths: List[str] = Field(description="Short statements of where the candidate matches well")
    gaps: List[str] = Field(description="Short statements of what the candidate is missing")
    recommendation: str = Field(description="Free-text hiring recommendation")

def score_tier(score: int) -> str:
    if score >= 80:
        return "strong"
    if score >= 60:
        return "moderate"
    return "weak"
