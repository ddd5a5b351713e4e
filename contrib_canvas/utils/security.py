#region Imports
import os
import re
from pathlib import Path
from typing import Optional
#endregion


#region Constants
# System directories that should never be written to
FORBIDDEN_WRITE_DIRS = [
    Path("/etc"),
    Path("/bin"),
    Path("/sbin"),
    Path("/usr/bin"),
    Path("/usr/sbin"),
    Path("/sys"),
    Path("/proc"),
    Path("/boot"),
    Path("/dev"),
    Path("C:\\Windows"),
    Path("C:\\Program Files"),
    Path("C:\\Program Files (x86)"),
    Path("C:\\ProgramData"),
]
#endregion


#region Functions


def validate_output_path(path: Path) -> tuple[bool, Optional[str]]:
    """
    Validate that an output image path is safe to write to.

    Checks for:
    - Writes to system directories
    - Unwritable parent directories
    - Symbolic link overwrites

    Args:
        path: The path to validate

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_output_path(Path("/tmp/contributions.png"))
        (True, None)
        >>> validate_output_path(Path("/etc/contributions.png"))
        (False, "Cannot write to system directory: /etc")
    """
    try:
        # Symlink check must run before resolve() follows the link
        if path.is_symlink():
            return False, "Cannot overwrite symbolic links"

        abs_path = path.resolve()

        for forbidden in FORBIDDEN_WRITE_DIRS:
            try:
                abs_path.relative_to(forbidden)
                return False, f"Cannot write to system directory: {forbidden}"
            except ValueError:
                continue

        parent = abs_path.parent
        if not parent.exists():
            if parent.parent.exists() and not os.access(parent.parent, os.W_OK):
                return False, "Parent directory is not writable"
        elif not os.access(parent, os.W_OK):
            return False, "Directory is not writable"

        return True, None

    except (OSError, RuntimeError, ValueError) as e:
        return False, f"Invalid path: {e}"


def safe_filename_part(value: str) -> str:
    """
    Reduce a string to characters that are safe in a file name.

    Examples:
        >>> safe_filename_part("octo/cat")
        "octo_cat"
    """
    cleaned = re.sub(r"[^\w\-]", "_", value).strip("_")
    return cleaned or "user"


#endregion
