from pydantic import BaseModel


class CoachRequest(BaseModel):
    prompt: str
