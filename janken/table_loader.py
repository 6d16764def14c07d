"""
Difficulty Table Loader - YAML configuration loading with Pydantic validation.

Loads alternative difficulty tables from YAML files and validates them
with the DifficultyTable model.

Examples:
    >>> loader = DifficultyTableLoader()
    >>> table = loader.load_table("frantic")
    >>> table.levels[0].spawn_interval
    2.0
    >>> loader.list_available_tables()
    ['classic', 'frantic']
"""

from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import ValidationError

from janken.models import DifficultyTable

TABLES_DIR = Path(__file__).parent / "tables"


class DifficultyTableLoader:
    """Loads and validates difficulty tables from YAML files.

    Attributes:
        tables_dir: Directory containing ``<name>.yaml`` tables
    """

    def __init__(self, tables_dir: Optional[Union[str, Path]] = None):
        """Initialize the loader.

        Args:
            tables_dir: Optional custom tables directory.
                        Defaults to the tables bundled with the package.
        """
        self.tables_dir = Path(tables_dir) if tables_dir is not None else TABLES_DIR

    def load_table(self, name: str) -> DifficultyTable:
        """Load a table by name from the tables directory.

        Args:
            name: Table name (file name without .yaml)

        Returns:
            Validated DifficultyTable

        Raises:
            FileNotFoundError: If the table file doesn't exist
            ValueError: If the YAML content is invalid
            yaml.YAMLError: If the YAML syntax is malformed
        """
        yaml_path = self.tables_dir / f"{name}.yaml"

        if not yaml_path.exists():
            raise FileNotFoundError(
                f"Difficulty table '{name}' not found. "
                f"Expected file: {yaml_path}"
            )

        return self.load_file(yaml_path)

    def load_file(self, yaml_path: Union[str, Path]) -> DifficultyTable:
        """Load a table from an explicit YAML path.

        The table name defaults to the file stem when the YAML omits it.
        """
        yaml_path = Path(yaml_path)

        try:
            with open(yaml_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(
                f"Failed to parse YAML file '{yaml_path}': {e}"
            )

        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid difficulty table in '{yaml_path}': expected a mapping"
            )
        data.setdefault('name', yaml_path.stem)

        try:
            return DifficultyTable(**data)
        except ValidationError as e:
            raise ValueError(
                f"Invalid difficulty table in '{yaml_path}':\n{e}"
            ) from e

    def list_available_tables(self) -> List[str]:
        """Names of all tables in the directory, sorted alphabetically."""
        if not self.tables_dir.exists():
            return []
        return sorted(f.stem for f in self.tables_dir.glob("*.yaml"))

    def table_exists(self, name: str) -> bool:
        """Check if a table exists."""
        return (self.tables_dir / f"{name}.yaml").exists()
