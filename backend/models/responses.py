from pydantic import BaseModel

from models.schemas.job_posting import ExpiryUpdate
from models.schemas.skill_match import MatchReport


class JobMatchResponse(BaseModel):
    report: MatchReport
    expiry: ExpiryUpdate = ExpiryUpdate()
    formatted_salary: str = "Negotiable"
