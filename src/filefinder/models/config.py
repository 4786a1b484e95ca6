"""
Configuration models for filefinder.

These Pydantic models describe the search defaults that can be stored in a
YAML configuration file and overridden from the command line.
"""

from typing import TYPE_CHECKING, Dict, List, Optional, Any, Union
import os
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import InvalidPatternError
from ..tools.predicates import compile_pattern

if TYPE_CHECKING:
    from ..finder import Finder


DEFAULT_DEPTH = 99999


class FinderConfig(BaseModel):
    """
    Search defaults for the filefinder command.

    Attributes:
        depth: Maximum traversal depth
        extension: File extension to keep (e.g. '.py')
        pattern: Regex searched in each file's base name
        size_greater_than: Keep files of at least this many bytes
        size_less_than: Keep files of at most this many bytes
        case_sensitive: Compare the extension case-sensitively
    """

    model_config = ConfigDict(extra='forbid')

    depth: int = Field(DEFAULT_DEPTH, ge=0, description="Maximum traversal depth")
    extension: Optional[str] = Field(None, description="File extension to keep")
    pattern: Optional[str] = Field(None, description="Regex matched against file names")
    size_greater_than: Optional[int] = Field(None, ge=0, description="Minimum file size in bytes")
    size_less_than: Optional[int] = Field(None, ge=0, description="Maximum file size in bytes")
    case_sensitive: bool = Field(False, description="Compare the extension case-sensitively")

    @field_validator('extension')
    @classmethod
    def validate_extension(cls, v: Optional[str]) -> Optional[str]:
        """Reject blank extensions."""
        if v is not None and not v.strip():
            raise ValueError("Extension cannot be blank")
        return v

    @field_validator('pattern')
    @classmethod
    def validate_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Ensure the regex compiles before any search starts."""
        if v is None:
            return v
        try:
            compile_pattern(v)
        except InvalidPatternError as e:
            raise ValueError(str(e)) from e
        return v

    def validate_configuration(self) -> List[str]:
        """
        Check for settings that are valid but probably not intended.

        Returns:
            List of warning messages
        """
        warnings = []

        if (self.size_greater_than is not None and self.size_less_than is not None
                and self.size_greater_than > self.size_less_than):
            warnings.append(
                f"size_greater_than ({self.size_greater_than}) exceeds size_less_than "
                f"({self.size_less_than}); no file can match"
            )

        if self.extension and not self.extension.startswith('.'):
            warnings.append(
                f"Extension '{self.extension}' has no leading dot and will match any path ending in it"
            )

        return warnings

    def merge(self, overrides: Dict[str, Any]) -> 'FinderConfig':
        """
        Return a new configuration with non-None overrides applied.

        Args:
            overrides: Field values, typically from command-line options

        Returns:
            Validated FinderConfig
        """
        data = self.model_dump()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return FinderConfig.model_validate(data)

    def build_finder(self, root: Union[str, os.PathLike]) -> 'Finder':
        """
        Create a Finder for ``root`` configured from these settings.

        Predicates are chained in a fixed order: size upper bound, size lower
        bound, extension, pattern.
        """
        from ..finder import Finder

        finder = Finder(root)

        if self.size_less_than is not None:
            finder = finder.size_less_than_or_equal(self.size_less_than)

        if self.size_greater_than is not None:
            finder = finder.size_greater_than_or_equal(self.size_greater_than)

        if self.extension is not None:
            if self.case_sensitive:
                finder = finder.has_extension(self.extension)
            else:
                finder = finder.has_extension_case_insensitive(self.extension)

        if self.pattern is not None:
            finder = finder.matches_regex(self.pattern)

        return finder

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FinderConfig':
        """Create a FinderConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        """String representation of the configuration."""
        parts = [f"Depth: {self.depth}"]
        if self.extension:
            mode = "case-sensitive" if self.case_sensitive else "case-insensitive"
            parts.append(f"Extension: {self.extension} ({mode})")
        if self.pattern:
            parts.append(f"Pattern: {self.pattern}")
        if self.size_greater_than is not None:
            parts.append(f"Size >= {self.size_greater_than}")
        if self.size_less_than is not None:
            parts.append(f"Size <= {self.size_less_than}")
        return " | ".join(parts)
