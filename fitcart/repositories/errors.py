class RepoError(Exception):
    """Base class for repository-level errors."""

    pass


# ------------------------- SETTINGS -------------------------


class SettingsRepoError(RepoError):
    """Raised when stored profile settings cannot be read or written."""

    pass
