# storage/path_utils.py

import os

DEFAULT_DATA_DIR = os.path.join("~", "Documents", "ModQuik")
ROSTER_FILENAME = "roster.json"


def get_data_dir(user_input: str | None) -> str:
    """
    Resolves the directory holding the roster file, from user input or the default location.

    Args:
        user_input (str | None): An optional user-specified directory path. If None or blank, the default path is used.

    Returns:
        A path string with `~` expanded. Defaults to `~/Documents/ModQuik`.
    """
    if user_input is not None and user_input.strip():
        return os.path.expanduser(user_input.strip())
    else:
        return os.path.expanduser(DEFAULT_DATA_DIR)


def resolve_data_file(dir_input: str | None) -> str:
    """
    Produces the roster file path, creating its directory if needed.

    Args:
        dir_input (str | None): An optional directory path string. If None, the default path is used.

    Returns:
        The path to `roster.json` inside the resolved directory.

    Notes:
        - Creates the directory path on disk (including parent directories) if it does not exist.
        - Does not create the roster file itself.
    """
    data_dir = get_data_dir(dir_input)

    os.makedirs(data_dir, exist_ok=True)

    return os.path.join(data_dir, ROSTER_FILENAME)
