"""
Configuration Persistence

Loads and saves the template configuration attached to a resume record.

Two stores are provided:
- InMemoryConfigStore: dict-backed, for tests and throwaway sessions
- SQLiteConfigStore: relational resumes table with a JSON template_config column

Both expose the same async adapter contract used by the controller:
- fetch_config(resume_id) -> dict (wire keys) or None when nothing is saved
- store_config(resume_id, config) -> None

Storage errors surface as PersistenceFailure.
"""

import asyncio
import copy
import json
import os
import sqlite3
from abc import ABC, abstractmethod
from contextlib import closing
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from dotenv import load_dotenv

from resumeforge.contexts.customization.config import FIELDS_BY_WIRE_KEY, validate_field_value
from resumeforge.contexts.customization.exceptions import (
    CustomizationError,
    PersistenceFailure,
    ResumeNotFoundError,
    UnknownConfigFieldError,
)
from resumeforge.utils.timestamp import now_exact

load_dotenv()
RESUMEFORGE_DB_PATH = Path(os.getenv("RESUMEFORGE_DB_PATH", "outs/resumeforge.db"))

ResumeId = Union[int, str]


def validate_config_payload(config: Mapping[str, Any]) -> None:
    """
    Validate a wire-keyed config before it is written.

    Raises:
        UnknownConfigFieldError: If a key is not a template option wire key
        InvalidConfigValueError: If a value has the wrong type
    """
    for key, value in config.items():
        if key not in FIELDS_BY_WIRE_KEY:
            raise UnknownConfigFieldError(key, FIELDS_BY_WIRE_KEY)
        validate_field_value(FIELDS_BY_WIRE_KEY[key], value)


class ConfigStore(ABC):
    """
    Abstract persistence adapter for template configurations.

    Subclasses must implement fetch_config() and store_config() and raise
    PersistenceFailure for any storage or network error.
    """

    @abstractmethod
    async def fetch_config(self, resume_id: ResumeId) -> Optional[Dict[str, Any]]:
        """Return the saved wire-keyed config, or None if none exists."""
        pass

    @abstractmethod
    async def store_config(self, resume_id: ResumeId, config: Mapping[str, Any]) -> None:
        """Persist a wire-keyed config, replacing any previous one."""
        pass


class InMemoryConfigStore(ConfigStore):
    """Dict-backed config store. Values are deep-copied in and out."""

    def __init__(self, configs: Optional[Mapping[ResumeId, Mapping[str, Any]]] = None):
        self._configs: Dict[str, Dict[str, Any]] = {}
        for resume_id, config in (configs or {}).items():
            self._configs[str(resume_id)] = copy.deepcopy(dict(config))

    async def fetch_config(self, resume_id: ResumeId) -> Optional[Dict[str, Any]]:
        config = self._configs.get(str(resume_id))
        return copy.deepcopy(config) if config is not None else None

    async def store_config(self, resume_id: ResumeId, config: Mapping[str, Any]) -> None:
        try:
            validate_config_payload(config)
        except CustomizationError as e:
            raise PersistenceFailure(
                "Rejected template configuration", resume_id, "store", e
            ) from e
        self._configs[str(resume_id)] = copy.deepcopy(dict(config))


class SQLiteConfigStore(ConfigStore):
    """
    SQLite-backed resume store.

    Holds resume records (name, template, content) and the saved template
    configuration of each. Persistent: create once with create(), then open
    later by instantiating with the db_path.

    Each operation opens its own connection, so the async adapter methods can
    run the blocking work in a worker thread.
    """

    def __init__(self, db_path: Path = None):
        """
        Open an existing database.

        To create a new database, use SQLiteConfigStore.create() instead.

        Args:
            db_path: Path to SQLite database file (defaults to RESUMEFORGE_DB_PATH)

        Raises:
            FileNotFoundError: If database file doesn't exist
        """
        if db_path is None:
            db_path = RESUMEFORGE_DB_PATH
        self.db_path = Path(db_path)

        if not self.db_path.exists():
            raise FileNotFoundError(
                f"Database not found: {self.db_path}\n"
                f"To create a new database, use SQLiteConfigStore.create()"
            )

    @classmethod
    def create(cls, db_path: Path = None) -> "SQLiteConfigStore":
        """
        Create the database and schema if they don't exist yet, then open it.

        Existing data is kept.
        """
        if db_path is None:
            db_path = RESUMEFORGE_DB_PATH
        db_path = Path(db_path)
        db_path.parent.mkdir(parents=True, exist_ok=True)

        with closing(sqlite3.connect(str(db_path))) as conn, conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS resumes (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL DEFAULT 0,
                    name TEXT NOT NULL,
                    template_id TEXT NOT NULL,
                    content TEXT NOT NULL,
                    template_config TEXT,
                    created_at TEXT NOT NULL
                )
            """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_user_id ON resumes(user_id)")

        return cls(db_path)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    @staticmethod
    def _row_to_dict(row: sqlite3.Row) -> Dict[str, Any]:
        resume = dict(row)
        resume["content"] = json.loads(resume["content"])
        config = resume.pop("template_config")
        resume["template_config"] = json.loads(config) if config is not None else None
        return resume

    # --- Resume records ---

    def create_resume(
        self,
        name: str,
        template_id: str,
        content: Optional[Mapping[str, Any]] = None,
        user_id: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Insert a new resume record.

        Args:
            name: Resume display name
            template_id: Active template identifier
            content: Resume content (personal info, summary, experience, ...)
            user_id: Owner (None/0 for anonymous resumes)

        Returns:
            The created resume as a dict
        """
        with closing(self._connect()) as conn, conn:
            cursor = conn.execute(
                """
                INSERT INTO resumes (user_id, name, template_id, content, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (user_id or 0, name, template_id, json.dumps(dict(content or {})), now_exact()),
            )
            resume_id = cursor.lastrowid
        return self.get_resume(resume_id)

    def get_resume(self, resume_id: ResumeId) -> Optional[Dict[str, Any]]:
        """Get a resume record by id, or None if it doesn't exist."""
        with closing(self._connect()) as conn:
            row = conn.execute("SELECT * FROM resumes WHERE id = ?", (resume_id,)).fetchone()
        return self._row_to_dict(row) if row else None

    def list_resumes(self, user_id: Optional[int] = None) -> List[Dict[str, Any]]:
        """List resume records, optionally only those owned by user_id (None/0 = anonymous)."""
        with closing(self._connect()) as conn:
            if user_id is None:
                rows = conn.execute("SELECT * FROM resumes ORDER BY id").fetchall()
            else:
                rows = conn.execute(
                    "SELECT * FROM resumes WHERE user_id = ? ORDER BY id", (user_id or 0,)
                ).fetchall()
        return [self._row_to_dict(row) for row in rows]

    def update_resume_template(self, resume_id: ResumeId, template_id: str) -> Dict[str, Any]:
        """
        Switch the template of a resume.

        Raises:
            ResumeNotFoundError: If the resume doesn't exist
        """
        self._update(resume_id, "UPDATE resumes SET template_id = ? WHERE id = ?", (template_id,))
        return self.get_resume(resume_id)

    def update_resume_content(
        self, resume_id: ResumeId, name: str, content: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace the name and content of a resume.

        Raises:
            ResumeNotFoundError: If the resume doesn't exist
        """
        self._update(
            resume_id,
            "UPDATE resumes SET name = ?, content = ? WHERE id = ?",
            (name, json.dumps(dict(content))),
        )
        return self.get_resume(resume_id)

    def _update(self, resume_id: ResumeId, sql: str, params: tuple) -> None:
        with closing(self._connect()) as conn, conn:
            cursor = conn.execute(sql, params + (resume_id,))
            if cursor.rowcount == 0:
                raise ResumeNotFoundError(resume_id)

    # --- Adapter contract ---

    def _fetch_config_sync(self, resume_id: ResumeId) -> Optional[Dict[str, Any]]:
        resume = self.get_resume(resume_id)
        if resume is None:
            return None
        return resume["template_config"]

    def _store_config_sync(self, resume_id: ResumeId, config: Mapping[str, Any]) -> None:
        validate_config_payload(config)
        self._update(
            resume_id,
            "UPDATE resumes SET template_config = ? WHERE id = ?",
            (json.dumps(dict(config)),),
        )

    async def fetch_config(self, resume_id: ResumeId) -> Optional[Dict[str, Any]]:
        try:
            return await asyncio.to_thread(self._fetch_config_sync, resume_id)
        except (sqlite3.Error, json.JSONDecodeError) as e:
            raise PersistenceFailure(
                "Failed to read template configuration", resume_id, "fetch", e
            ) from e

    async def store_config(self, resume_id: ResumeId, config: Mapping[str, Any]) -> None:
        try:
            await asyncio.to_thread(self._store_config_sync, resume_id, config)
        except (sqlite3.Error, CustomizationError) as e:
            raise PersistenceFailure(
                "Failed to save template configuration", resume_id, "store", e
            ) from e
