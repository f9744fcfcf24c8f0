from pydantic import BaseModel, ConfigDict, Field

from ..utils.docs import example


EMAIL_REGEX = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class Submission(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(min_length=2, max_length=80, description="Name of the sender")
    email: str = Field(max_length=120, pattern=EMAIL_REGEX, description="Email address of the sender")
    message: str = Field(min_length=6, max_length=2000, description="Content of the message")
    captcha: str = Field(min_length=1, description="Recaptcha v3 response token")


class CaptchaVerdict(BaseModel):
    success: bool = Field(description="Whether the recaptcha service accepted the token")
    score: float = Field(ge=0, le=1, description="Recaptcha v3 score (1.0 is very likely a human)")


class ContactRequest(BaseModel):
    """Request body documented for `POST /contact`. Validation itself happens in the handler."""

    name: str = Field(description="Name of the sender (2-80 characters)")
    email: str = Field(description="Email address of the sender (at most 120 characters)")
    message: str = Field(description="Content of the message (6-2000 characters)")
    captcha: str = Field(description="Recaptcha v3 response token")

    model_config = example(
        name="Jane Doe", email="jane@example.com", message="Hello, I would like to get in touch.", captcha="03AFcWeA..."
    )


class ContactSent(BaseModel):
    success: bool = Field(description="Always true")
    message: str = Field(description="Confirmation message")

    model_config = example(success=True, message="Message sent, thank you!")
