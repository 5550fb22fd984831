# cli/path_utils.py

import os

DEFAULT_DATA_FILE = "students.dat"


def resolve_data_path(user_input: str | None = None) -> str:
    """
    Resolves the path of the roster data file.

    Args:
        user_input (str | None): An optional user-specified file path. If None or blank, the default is used.

    Returns:
        An absolute path. User input has `~` expanded; otherwise `students.dat` in the current working directory.

    Notes:
        - The parent directory is created if it does not exist, so a later save can succeed.
    """
    if user_input is not None and user_input.strip():
        path = os.path.expanduser(user_input.strip())
    else:
        path = DEFAULT_DATA_FILE

    path = os.path.abspath(path)

    os.makedirs(os.path.dirname(path), exist_ok=True)

    return path
