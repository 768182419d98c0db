"""Configuration management for hierns."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from hierns.config.file_ops import write_text_file
from hierns.config.paths import default_config_path
from hierns.platform.logging import logger

JSON_INDENT_DEFAULT: Final[int] = 2
SHOW_TREE_DEFAULT: Final[bool] = True


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path; falls back to <repo_root>/logs/hierns.log
    log_file: Path | None = _path_field()

    # Indentation used when printing structured (JSON) encodings
    json_indent: int = JSON_INDENT_DEFAULT

    # Whether CLI reports include a tree view of the segment
    show_tree: bool = SHOW_TREE_DEFAULT

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Normalize loaded values.

        String paths flagged with ``metadata={"path": True}`` become ``Path``
        objects (empty strings become ``None``). An invalid ``json_indent`` or a
        non-boolean ``show_tree`` (such as the string ``"false"``) falls back
        to its default.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if (
            isinstance(self.json_indent, bool)
            or not isinstance(self.json_indent, int)
            or self.json_indent < 0
        ):
            logger.warning(
                "Invalid json_indent %r; using %d", self.json_indent, JSON_INDENT_DEFAULT
            )
            self.json_indent = JSON_INDENT_DEFAULT

        if not isinstance(self.show_tree, bool):
            logger.warning(
                "Invalid show_tree %r; using %s", self.show_tree, SHOW_TREE_DEFAULT
            )
            self.show_tree = SHOW_TREE_DEFAULT

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        # Convert Path objects to strings for serialization
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# hierns Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs")
        lines.append('# Example: log_file = "/path/to/logs/hierns.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Indentation for structured (JSON) output (default 2)")
        lines.append(f"json_indent = {self._format_toml_value(config['json_indent'])}")
        lines.append("")

        lines.append("# Show a tree view of segments in CLI reports (default true)")
        lines.append(f"show_tree = {self._format_toml_value(config['show_tree'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file, creating a default file when missing.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys: %s", ", ".join(unknown)
                    )

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

    @classmethod
    def reset(cls) -> None:
        """Drop the cached instance so the next ``load`` re-reads the file."""
        cls._instance = None
        cls._loaded_from = None


__all__ = ["JSON_INDENT_DEFAULT", "SHOW_TREE_DEFAULT", "Config"]
