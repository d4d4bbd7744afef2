"""Lazily converted angles in degrees, radians, gradians and degrees/minutes/seconds."""

import importlib.metadata

__version__ = importlib.metadata.version("py_angle")

# Standard library imports
import importlib.resources
import os
import sys

# Third-party imports
from typing_extensions import Dict, Optional, Union

# Local imports
from .logger import logger as log
from .unit import Unit, PreferredUnits

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load configuration from a .pyangle.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pyangle.toml or pyangle.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pyangle_toml(start_dir: str = os.getcwd()) -> Optional[str]:
        """Search upwards from `start_dir` for .pyangle.toml or pyangle.toml."""
        current_dir = os.path.abspath(start_dir)
        while True:
            for path in (os.path.join(current_dir, '.pyangle.toml'),
                         os.path.join(current_dir, 'pyangle.toml')):
                if os.path.exists(path):
                    return os.path.abspath(path)

            parent_dir = os.path.dirname(current_dir)
            # If we have reached the root directory, stop searching
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_pyangle_toml()) is None:
            filepath = find_pyangle_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

            if _pyangle := _config.get('pyangle'):
                if preferred_units := _pyangle.get('preferred_units'):
                    PreferredUnits.set(**preferred_units)
                else:
                    if not suppress_warnings:
                        log.warning("Config has no `pyangle.preferred_units` section")
            else:
                if not suppress_warnings:
                    log.warning("Config has no `pyangle` section")

    log.debug("PreferredUnits load success")


def _basic_config(filename: Optional[str] = None,
                  preferred_units: Optional[Dict[str, Union[Unit, str]]] = None,
                  suppress_warnings: bool = False) -> None:
    """Load preferred units from file or Mapping.

    Args:
        filename: Configuration file path
        preferred_units: Dictionary of preferred units
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and preferred_units are provided
    """
    if filename and preferred_units:
        raise ValueError("Can't use preferred_units and config file at same time")
    if not filename and preferred_units:
        PreferredUnits.set(**preferred_units)
    else:
        _load_config(filename, suppress_warnings)


def _resolve_resource_path(path: str) -> str:
    return str(importlib.resources.files('py_angle').joinpath(path))


def _load_degree_units() -> None:
    """Read unit-less literals as degrees."""
    _basic_config(_resolve_resource_path('assets/.pyangle-degrees.toml'), suppress_warnings=True)


def _load_radian_units() -> None:
    """Read unit-less literals as radians."""
    _basic_config(_resolve_resource_path('assets/.pyangle-radians.toml'), suppress_warnings=True)


loadDegreeUnits = _load_degree_units
loadRadianUnits = _load_radian_units

basicConfig = _basic_config

basicConfig()


from .exceptions import (AngleTypeError, AngleValueError, AngleDomainError, InvalidAngleError,
                         UnitAliasError, AngleContractError)
from .literal import angle_literal, a
from .logger import logger, enable_file_logging, disable_file_logging
from .trig import TrigResult
from .unit import (UnitProps, UnitPropsDict, UnitAliases, AngleUnit, Degree, Radian, Gradian, DMS,
                   absolute_value, zero, degrees, radians, gradians, dms,
                   to_degrees, to_radians, to_gradians, to_dms)
from .utils import Result, string_to_integer, string_to_float, string_to_number
from .value import Angle, format_angle
from . import trig

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib",
    # Skip submodules and typing helpers
    "exceptions", "literal", "logger", "unit", "utils", "value",
    "Dict", "Optional", "Union", "log",
    # Skip private/internal symbols
    "_load_config", "_basic_config", "_resolve_resource_path",
    "_load_degree_units", "_load_radian_units"
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
# The logger submodule name is shadowed by the logger instance
__all__.append("logger")
