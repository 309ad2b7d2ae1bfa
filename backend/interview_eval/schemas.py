# backend/interview_eval/schemas.py
# Wire shapes of the callable endpoint. Interview documents themselves stay
# plain dicts so fields this service does not know about survive the round trip.
from pydantic import BaseModel, Field


class EvaluateData(BaseModel):
    docId: str = ""


class CallableRequest(BaseModel):
    data: EvaluateData = Field(default_factory=EvaluateData)


class EvaluateResult(BaseModel):
    success: bool
    docId: str


class CallableResponse(BaseModel):
    result: EvaluateResult


class CallableErrorBody(BaseModel):
    status: str
    message: str


class CallableError(BaseModel):
    error: CallableErrorBody
