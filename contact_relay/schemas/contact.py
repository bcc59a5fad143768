from pydantic import BaseModel, Field


class Submission(BaseModel):
    name: str = Field("", description="Name of the sender")
    email: str = Field("", description="Email of the sender, used as reply-to address")
    message: str = Field("", description="Content of the message")
