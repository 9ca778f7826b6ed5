from typing import Optional

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """
    Body accepted by every chat endpoint.

    Force flags are only read by /ai; direct provider routes ignore them.
    """

    text: Optional[str] = Field(default=None, description="Prompt forwarded to the provider.")
    force_mistral: bool = Field(default=False, description="/ai: call Mistral only.")
    force_cohere: bool = Field(default=False, description="/ai: call Cohere only.")
    force_groq: bool = Field(default=False, description="/ai: call Groq only.")


class ChatResponse(BaseModel):
    response: str
