"""
Configuration loader for PyGap.
Provides unified access to YAML, TOML, and JSON configuration files.

Supports:
- YAML (.yaml, .yml) - species catalog, simulation constants
- TOML (.toml) - structured configuration with types
- JSON (.json) - machine-written catalogs

A species file holds either a ``columns`` list plus ``species`` rows
(sequences in column order), or ``species`` as a list of mappings.
"""
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .exceptions import ConfigurationError, ConfigFileNotFoundError, InvalidDataError
from .logging_config import get_logger
from .parameters import SimulationParameters
from .species import PFT_FIELDS, SpeciesCatalog

# Handle TOML imports for different Python versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

__all__ = [
    'ConfigLoader',
    'get_config_loader',
    'load_species_catalog',
    'load_simulation_parameters',
    'SPECIES_CONFIG_FILE',
    'PARAMETERS_CONFIG_FILE',
]

SPECIES_CONFIG_FILE = 'species_config.yaml'
PARAMETERS_CONFIG_FILE = 'simulation_parameters.yaml'

logger = get_logger(__name__)


class ConfigLoader:
    """Loads the species catalog and simulation constants from the cfg/ directory.

    Attributes:
        cfg_dir: Path to the configuration directory
    """

    def __init__(self, cfg_dir: Optional[Union[str, Path]] = None):
        """Initialize the configuration loader.

        Args:
            cfg_dir: Path to the configuration directory. Defaults to the
                cfg/ directory shipped inside the package.
        """
        if cfg_dir is None:
            cfg_dir = Path(__file__).parent / 'cfg'
        self.cfg_dir = Path(cfg_dir)
        self._catalog_cache: Dict[str, SpeciesCatalog] = {}

    def _load_config_file(self, file_path: Path) -> Dict[str, Any]:
        """Load configuration from a YAML, TOML or JSON file.

        Args:
            file_path: Path to the configuration file

        Returns:
            Dictionary containing configuration data

        Raises:
            ConfigFileNotFoundError: If file doesn't exist
            InvalidDataError: If the file cannot be parsed or is empty
            ConfigurationError: If file format is not supported
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise ConfigFileNotFoundError(str(file_path), "configuration file")

        suffix = file_path.suffix.lower()

        try:
            if suffix in ['.yaml', '.yml']:
                with open(file_path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f)
                if data is None:
                    raise InvalidDataError("YAML file", "file is empty or contains only comments")
            elif suffix == '.toml':
                with open(file_path, 'rb') as f:
                    data = tomllib.load(f)
            elif suffix == '.json':
                with open(file_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if data is None:
                    raise InvalidDataError("JSON file", "file is empty or contains null")
            else:
                raise ConfigurationError(f"Unsupported configuration file format: {suffix}. "
                                         f"Supported formats: .yaml, .yml, .toml, .json")
        except yaml.YAMLError as e:
            raise InvalidDataError("YAML configuration", f"parsing error: {str(e)}") from e
        except json.JSONDecodeError as e:
            raise InvalidDataError("JSON configuration", f"parsing error: {str(e)}") from e
        except tomllib.TOMLDecodeError as e:
            raise InvalidDataError("TOML configuration", f"parsing error: {str(e)}") from e

        if not isinstance(data, dict):
            raise InvalidDataError(f"configuration file {file_path.name}",
                                   "top level must be a mapping")
        return data

    def _resolve(self, path: Optional[Union[str, Path]], default_name: str) -> Path:
        if path is None:
            return self.cfg_dir / default_name
        return Path(path)

    @staticmethod
    def species_records(config: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Convert a species configuration mapping into PFT records.

        Raises:
            InvalidDataError: If the table layout is malformed
        """
        rows = config.get('species')
        if not isinstance(rows, list):
            raise InvalidDataError("species configuration", "'species' must be a list")

        columns = config.get('columns')
        if columns is None:
            if not all(isinstance(row, dict) for row in rows):
                raise InvalidDataError("species configuration",
                                       "rows must be mappings when no 'columns' are given")
            return [dict(row) for row in rows]

        columns = list(columns)
        unknown = [name for name in columns if name not in PFT_FIELDS]
        if unknown:
            raise InvalidDataError("species configuration", f"unknown columns {unknown}")

        records = []
        for index, row in enumerate(rows):
            if not isinstance(row, (list, tuple)) or len(row) != len(columns):
                raise InvalidDataError(
                    "species configuration",
                    f"row {index} must have {len(columns)} values, got {row!r}"
                )
            records.append(dict(zip(columns, row)))
        return records

    def load_catalog(self, path: Optional[Union[str, Path]] = None,
                     require_all_groups: bool = True) -> SpeciesCatalog:
        """Load and build a species catalog.

        Args:
            path: Species configuration file. Defaults to cfg/species_config.yaml.
            require_all_groups: Passed to SpeciesCatalog.build()

        Returns:
            SpeciesCatalog (cached per path)
        """
        file_path = self._resolve(path, SPECIES_CONFIG_FILE)
        cache_key = f"{file_path.resolve()}:{require_all_groups}"
        if cache_key not in self._catalog_cache:
            config = self._load_config_file(file_path)
            catalog = SpeciesCatalog.build(self.species_records(config),
                                           require_all_groups=require_all_groups)
            logger.info(f"Loaded {len(catalog)} species from {file_path.name}")
            self._catalog_cache[cache_key] = catalog
        return self._catalog_cache[cache_key]

    def load_parameters(self, path: Optional[Union[str, Path]] = None) -> SimulationParameters:
        """Load simulation constants.

        Args:
            path: Parameters file. Defaults to cfg/simulation_parameters.yaml.

        Returns:
            SimulationParameters
        """
        file_path = self._resolve(path, PARAMETERS_CONFIG_FILE)
        return SimulationParameters.from_dict(self._load_config_file(file_path))

    def clear_cache(self) -> None:
        """Clear the catalog cache.

        Useful for testing or when configuration files may have changed.
        """
        self._catalog_cache.clear()


# Global configuration loader instance
_config_loader: Optional[ConfigLoader] = None


def get_config_loader() -> ConfigLoader:
    """Get the shared configuration loader for the packaged cfg/ directory."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def load_species_catalog(path: Optional[Union[str, Path]] = None) -> SpeciesCatalog:
    """Convenience function to load a species catalog.

    Args:
        path: Species configuration file. Defaults to the packaged catalog.
    """
    return get_config_loader().load_catalog(path)


def load_simulation_parameters(path: Optional[Union[str, Path]] = None) -> SimulationParameters:
    """Convenience function to load simulation constants.

    Args:
        path: Parameters file. Defaults to the packaged constants.
    """
    return get_config_loader().load_parameters(path)
