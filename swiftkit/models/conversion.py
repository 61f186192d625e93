"""Image conversion request models."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from swiftkit.models.files import to_utf8_text


class ConversionTarget(BaseModel):
    """Validated input image and the output path an encoder should write to."""

    img_path: Path = Field(description="Absolute path of the source image")
    output_path: Path = Field(description="Absolute path of the file to be created")

    @field_serializer("img_path", "output_path")
    def _serialize_path(self, value: Path) -> str:
        return to_utf8_text(str(value))
