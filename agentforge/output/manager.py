"""Saved-skill management -- writes generated skills to disk and lists them.

Layout under ``output_dir``::

    <output_dir>/<skill-name>/
        SKILL.md
        <one file per code file>
        <one file per test file>
        metadata.json
"""

from __future__ import annotations

import json
from pathlib import Path

import aiofiles  # type: ignore[import-untyped]
from pydantic import BaseModel

from agentforge.core.generation.models import GeneratedSkillRecord
from agentforge.utils.exceptions import SkillStorageError
from agentforge.utils.file_utils import ensure_dir, safe_filename
from agentforge.utils.logging import get_logger

logger = get_logger(__name__)

DOCUMENT_FILENAME = "SKILL.md"
METADATA_FILENAME = "metadata.json"
FALLBACK_SKILL_DIR = "generated-skill"


class SavedSkill(BaseModel):
    """Summary of a skill directory on disk."""

    name: str
    path: str
    description: str = ""
    version: str = ""
    files: list[str] = []
    quality_score: int = 0
    security_score: int = 0
    performance_score: int = 0
    is_valid: bool = False


class SkillOutputManager:
    """Writes :class:`GeneratedSkillRecord` objects to one directory each.

    Only called once a record exists; the generator itself does no I/O.
    """

    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)

    async def save(self, record: GeneratedSkillRecord) -> SavedSkill:
        """Persist *record* and return a summary of what was written.

        Raises :class:`SkillStorageError` on any filesystem failure.
        """
        dir_name = safe_filename(record.metadata.name) or FALLBACK_SKILL_DIR
        skill_dir = self.output_dir / dir_name

        files: dict[str, str] = {DOCUMENT_FILENAME: record.document}
        for entry in [*record.code_files, *record.test_files]:
            filename = safe_filename(Path(entry.filename).name)
            if not filename:
                raise SkillStorageError(f"Invalid filename: {entry.filename!r}")
            files[filename] = entry.content
        files[METADATA_FILENAME] = json.dumps(self._metadata_payload(record), indent=2)

        try:
            ensure_dir(skill_dir)
            for filename, content in files.items():
                async with aiofiles.open(skill_dir / filename, mode="w", encoding="utf-8") as fh:
                    await fh.write(content)
        except OSError as exc:
            logger.error("skill_save_failed", path=str(skill_dir), error=str(exc))
            raise SkillStorageError(f"Failed to save skill to {skill_dir}: {exc}") from exc

        saved = self._summary(skill_dir, self._metadata_payload(record), sorted(files))
        logger.info("skill_saved", name=saved.name, path=saved.path, files=len(files))
        return saved

    async def list_skills(self) -> list[SavedSkill]:
        """Return every saved skill that has a readable metadata file."""
        if not self.output_dir.is_dir():
            return []

        skills: list[SavedSkill] = []
        for skill_dir in sorted(p for p in self.output_dir.iterdir() if p.is_dir()):
            metadata_path = skill_dir / METADATA_FILENAME
            if not metadata_path.is_file():
                continue
            try:
                async with aiofiles.open(metadata_path, mode="r", encoding="utf-8") as fh:
                    payload = json.loads(await fh.read())
            except (OSError, json.JSONDecodeError) as exc:
                logger.warning("skill_metadata_unreadable", path=str(metadata_path), error=str(exc))
                continue
            files = sorted(p.name for p in skill_dir.iterdir() if p.is_file())
            skills.append(self._summary(skill_dir, payload, files))
        return skills

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _metadata_payload(record: GeneratedSkillRecord) -> dict:
        return {
            "metadata": record.metadata.model_dump(mode="json"),
            "dependencies": record.dependencies,
            "validation": record.validation.model_dump(mode="json"),
            "blockchain_config": (
                record.blockchain_config.model_dump(mode="json")
                if record.blockchain_config
                else None
            ),
        }

    @staticmethod
    def _summary(skill_dir: Path, payload: dict, files: list[str]) -> SavedSkill:
        metadata = payload.get("metadata") or {}
        validation = payload.get("validation") or {}
        return SavedSkill(
            name=metadata.get("name") or skill_dir.name,
            path=str(skill_dir.resolve()),
            description=metadata.get("description", ""),
            version=metadata.get("version", ""),
            files=files,
            quality_score=validation.get("quality_score", 0),
            security_score=validation.get("security_score", 0),
            performance_score=validation.get("performance_score", 0),
            is_valid=validation.get("is_valid", False),
        )
