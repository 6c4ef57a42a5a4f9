from __future__ import annotations

"""
Generation Options Domain.

Defines the read-only option set consumed by a single generate call and
the validation layer that turns untrusted caller input (plain dicts from
library users, CLI overrides) into a typed GenerateOptions instance.
Invalid values are coerced or replaced by defaults, with a warning
recorded for each adjustment.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

NodeFilter = Callable[[str, str, bool], bool]

TEMPLATE_ROLES: Tuple[str, ...] = ("project", "dir", "file")

# Original camelCase option names, accepted as aliases of the field names
_EVB_OPTION_ALIASES: Dict[str, str] = {
    "deleteExtractedOnExit": "delete_extracted_on_exit",
    "compressFiles": "compress_files",
    "shareVirtualSystem": "share_virtual_system",
    "mapExecutableWithTemporaryFile": "map_executable_with_temporary_file",
    "allowRunningOfVirtualExeFiles": "allow_running_of_virtual_exe_files",
}

# Marker keys of the wrapper flags in the project template
EVB_OPTION_KEYS: Tuple[str, ...] = tuple(_EVB_OPTION_ALIASES)

_KNOWN_KEYS = {"filter", "template_path", "evb_options", "escape_xml"} | set(TEMPLATE_ROLES)

# -----------------------------------------------------------------------------
# OPTION MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EvbOptions:
    """
    Behaviour flags embedded verbatim in the project document.

    Attributes:
        delete_extracted_on_exit: Remove extracted files when the packed exe exits.
        compress_files: Compress the virtual files inside the output exe.
        share_virtual_system: Expose the virtual filesystem to child processes.
        map_executable_with_temporary_file: Map virtual exes through a temp file.
        allow_running_of_virtual_exe_files: Allow packed exes to be launched.
    """
    delete_extracted_on_exit: bool = True
    compress_files: bool = True
    share_virtual_system: bool = False
    map_executable_with_temporary_file: bool = True
    allow_running_of_virtual_exe_files: bool = True

    def placeholders(self) -> Dict[str, bool]:
        """Map each flag to the placeholder key used in project templates."""
        return {alias: getattr(self, name) for alias, name in _EVB_OPTION_ALIASES.items()}


@dataclass(frozen=True)
class TemplatePaths:
    """Caller-supplied template locations; empty means use the bundled default."""
    project: str = ""
    dir: str = ""
    file: str = ""


def accept_all(full_path: str, name: str, is_dir: bool) -> bool:
    """Default node filter: every file and directory is packed."""
    return True


@dataclass(frozen=True)
class GenerateOptions:
    """
    Complete option set for one generate call.

    Attributes:
        filter: Predicate deciding whether a node (and its subtree) is packed.
        template_path: Template location overrides.
        evb_options: Wrapper behaviour flags.
        escape_xml: Escape XML-significant characters in names and paths.
    """
    filter: NodeFilter = accept_all
    template_path: TemplatePaths = field(default_factory=TemplatePaths)
    evb_options: EvbOptions = field(default_factory=EvbOptions)
    escape_xml: bool = False


def get_default_evb_options() -> Dict[str, bool]:
    """
    Return the documented defaults of the wrapper flags.

    Returns:
        Dict[str, bool]: Flag name to default value.
    """
    defaults = EvbOptions()
    return {f.name: getattr(defaults, f.name) for f in fields(EvbOptions)}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_options(
        options: Any = None,
        *,
        strict: bool = False,
) -> Tuple[GenerateOptions, List[str]]:
    """
    Validate caller options and normalize them into GenerateOptions.

    Accepts None, a ready GenerateOptions instance, or a mapping. Template
    paths may also be given as top-level 'project'/'dir'/'file' keys, the
    layout used by older callers that passed the template mapping directly.

    Args:
        options: Raw options.
        strict: If True, raise TypeError instead of falling back to defaults.

    Returns:
        Tuple[GenerateOptions, List[str]]: Normalized options and warnings.
    """
    warnings: List[str] = []

    if options is None:
        return GenerateOptions(), warnings
    if isinstance(options, GenerateOptions):
        return options, warnings

    if not isinstance(options, Mapping):
        msg = f"Invalid options type: expected mapping, received {type(options).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return GenerateOptions(), warnings

    for key in options:
        if key not in _KNOWN_KEYS:
            warnings.append(f"Unknown option '{key}' ignored.")

    node_filter = options.get("filter") or accept_all
    if not callable(node_filter):
        raise TypeError(f"Invalid option 'filter': expected callable, received {type(node_filter).__name__}.")

    resolved = GenerateOptions(
        filter=node_filter,
        template_path=_resolve_template_paths(options, warnings, strict),
        evb_options=_resolve_evb_options(options.get("evb_options"), warnings, strict),
        escape_xml=_as_bool(options.get("escape_xml"), False, "escape_xml", warnings, strict),
    )

    for w in warnings:
        logger.debug(f"Options: {w}")
    return resolved, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: SECTION RESOLUTION
# -----------------------------------------------------------------------------

def _resolve_template_paths(
        options: Mapping[str, Any],
        warnings: List[str],
        strict: bool,
) -> TemplatePaths:
    """Merge the template_path section with legacy top-level role keys."""
    section = options.get("template_path")
    if isinstance(section, TemplatePaths):
        section = {role: getattr(section, role) for role in TEMPLATE_ROLES}
    elif section is None:
        section = {}
    elif not isinstance(section, Mapping):
        msg = f"Invalid field 'template_path': expected mapping, received {type(section).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        section = {}

    paths: Dict[str, str] = {}
    for role in TEMPLATE_ROLES:
        explicit = _as_path(section.get(role), "", f"template_path.{role}", warnings, strict)
        legacy = _as_path(options.get(role), "", role, warnings, strict)
        paths[role] = explicit or legacy
    return TemplatePaths(**paths)


def _resolve_evb_options(section: Any, warnings: List[str], strict: bool) -> EvbOptions:
    """Coerce the evb_options section, accepting snake_case or camelCase keys."""
    if section is None:
        return EvbOptions()
    if isinstance(section, EvbOptions):
        return section
    if not isinstance(section, Mapping):
        msg = f"Invalid field 'evb_options': expected mapping, received {type(section).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return EvbOptions()

    defaults = get_default_evb_options()
    values: Dict[str, bool] = {}
    for key, raw in section.items():
        name = _EVB_OPTION_ALIASES.get(key, key)
        if name not in defaults:
            warnings.append(f"Unknown wrapper option '{key}' ignored.")
            continue
        values[name] = _as_bool(raw, defaults[name], f"evb_options.{key}", warnings, strict)
    return EvbOptions(**values)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_path(value: Any, fallback: str, name: str, warnings: List[str], strict: bool) -> str:
    """Validate path inputs; only None and "" count as unset, whitespace is kept."""
    if value is None or value == "":
        return fallback
    if isinstance(value, str):
        return value

    msg = f"Invalid field '{name}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, name: str, warnings: List[str], strict: bool) -> bool:
    """Coerce numeric and keyword inputs into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{name}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{name}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{name}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{name}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def options_to_dict(options: Optional[GenerateOptions]) -> Dict[str, Any]:
    """Render options as a JSON-friendly dict (the filter is omitted)."""
    opts = options or GenerateOptions()
    return {
        "template_path": {role: getattr(opts.template_path, role) for role in TEMPLATE_ROLES},
        "evb_options": {f.name: getattr(opts.evb_options, f.name) for f in fields(EvbOptions)},
        "escape_xml": opts.escape_xml,
    }
