# jsmigrate/recipes/base.py
# AI-Mind (c) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Base codemod interface.

A codemod takes one parsed file and returns the rewritten source text, or
None when it found nothing to change. Concrete codemods are parameterized by a
pydantic config so one implementation serves every recipe of its family.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from pydantic import BaseModel

from ..syntax import TSX, SgRoot


class Codemod(ABC):
    """Base class for single-file source transformations."""

    config_model: ClassVar[type[BaseModel]]

    def __init__(self, config: Optional[BaseModel] = None, name: Optional[str] = None):
        """Initialize with a config, falling back to the model defaults."""
        self.config = config if config is not None else self.config_model()
        self.name = name or self.__class__.__name__

    @abstractmethod
    def transform(self, root: SgRoot) -> Optional[str]:
        """Rewrite a parsed file.

        Args:
            root: Parsed source file.

        Returns:
            New source text, or None if no candidate was found.
        """
        pass

    def transform_source(self, source: str, language: str = TSX) -> Optional[str]:
        """Parse `source` and transform it.

        Raises:
            ParseError: If the source has syntax errors.
        """
        return self.transform(SgRoot(source, language))

    def with_overrides(self, overrides: dict[str, Any]) -> "Codemod":
        """Copy of this codemod with some config fields replaced."""
        data = {**self.config.model_dump(), **overrides}
        return self.__class__(self.config_model.model_validate(data), name=self.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
