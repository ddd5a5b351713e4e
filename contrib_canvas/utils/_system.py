#region Imports
import platform
import subprocess
from pathlib import Path
#endregion


#region Functions


def open_file(file_path: Path) -> bool:
    """
    Open a file with the default application (cross-platform).

    Args:
        file_path: Path to the file to open

    Returns:
        True if the opener exited cleanly, False otherwise
    """
    system = platform.system()
    if system == "Darwin":  # macOS
        command = ["open", str(file_path)]
    elif system == "Windows":
        # Empty string after start is the window title
        command = ["cmd", "/c", "start", "", str(file_path)]
    else:  # Linux and others
        command = ["xdg-open", str(file_path)]

    try:
        result = subprocess.run(command, check=False)
    except OSError:
        return False
    return result.returncode == 0


#endregion
