"""
Wire models for the remote generation endpoint.
"""

from pydantic import BaseModel, Field


class GenerationRequest(BaseModel):
    system: str
    message: str
    assistant_name: str = Field(alias="AI")

    model_config = {"populate_by_name": True}


class GenerationResponse(BaseModel):
    """Any payload exposing a non-empty `response` string conforms; extra fields are ignored."""
    response: str

    model_config = {"extra": "ignore"}
