"""Artifact list schema — the JSON handed over by the build tool."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from jarscan.models import Artifact


class ArtifactRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    group_id: str = Field(alias="groupId")
    artifact_id: str = Field(alias="artifactId")
    version: str
    type: str | None = None
    classifier: str | None = None
    file: Path | None = None

    def to_artifact(self) -> Artifact:
        return Artifact(
            group_id=self.group_id,
            artifact_id=self.artifact_id,
            version=self.version,
            type=self.type,
            classifier=self.classifier,
            file=self.file,
        )


_RECORDS = TypeAdapter(list[ArtifactRecord])


def load_artifacts(path: Path) -> list[Artifact]:
    """Load a JSON array of artifact records.

    Raises:
        pydantic.ValidationError: the document does not match the schema.
        json.JSONDecodeError: the file is not valid JSON.
        UnicodeDecodeError: the file is not UTF-8.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    return [record.to_artifact() for record in _RECORDS.validate_python(data)]
