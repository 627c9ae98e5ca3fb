from pydantic import BaseModel, Field, model_validator
from typing import Literal, Optional

class ColorIn(BaseModel):
    # either r/g/b or a hex string such as "#FF8B7E"
    r: Optional[int] = Field(default=None, ge=0, le=255)
    g: Optional[int] = Field(default=None, ge=0, le=255)
    b: Optional[int] = Field(default=None, ge=0, le=255)
    hex: Optional[str] = None

    @model_validator(mode="after")
    def _one_form(self):
        channels = (self.r, self.g, self.b)
        if self.hex is None and None in channels:
            raise ValueError("give r, g and b, or hex")
        if self.hex is not None and any(c is not None for c in channels):
            raise ValueError("give r, g and b, or hex, not both")
        return self

class ColorOut(BaseModel):
    r: int
    g: int
    b: int
    hex: str
    on_color: Literal["black", "white"]   # text color readable on top of the swatch

class SwatchOut(ColorOut):
    name: str

class NotificationOut(BaseModel):
    kind: Literal["error", "permission"]
    message: str
    actions: list[str] = []

class StatusResponse(BaseModel):
    has_image: bool
    has_processed: bool
    loading: bool
    can_submit: bool
    color: ColorOut
    notification: Optional[NotificationOut] = None
    last_error: Optional[str] = None
    logs: list[str]

class PhotoResponse(BaseModel):
    ok: bool
    captured: bool
    filename: Optional[str] = None
    size: int = 0

class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
    message: str
    status: Optional[int] = None    # upstream HTTP status for SERVER_ERROR
    detail: Optional[str] = None    # transport failure description

class SettingsHintResponse(BaseModel):
    ok: bool
    hint: str
